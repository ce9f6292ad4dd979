class CliAdapterLayerClass:
    """Stand-in for the CLI adapter."""

    def call_me(self) -> None:
        pass

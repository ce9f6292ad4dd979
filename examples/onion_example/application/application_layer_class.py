class ApplicationLayerClass:
    """Stand-in for the application ring."""

    def call_me(self) -> None:
        pass

class RestAdapterLayerClass:
    """Stand-in for the REST adapter."""

    def call_me(self) -> None:
        pass

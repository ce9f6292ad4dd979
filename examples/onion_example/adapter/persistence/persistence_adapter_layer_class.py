class PersistenceAdapterLayerClass:
    """Stand-in for the persistence adapter."""

    def call_me(self) -> None:
        pass

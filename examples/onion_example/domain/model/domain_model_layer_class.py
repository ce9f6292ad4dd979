class DomainModelLayerClass:
    """Stand-in for the domain model ring."""

    def call_me(self) -> None:
        pass

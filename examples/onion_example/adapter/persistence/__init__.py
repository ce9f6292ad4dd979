from .persistence_adapter_layer_class import PersistenceAdapterLayerClass

__all__ = ["PersistenceAdapterLayerClass"]

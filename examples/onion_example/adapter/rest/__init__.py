from .rest_adapter_layer_class import RestAdapterLayerClass

__all__ = ["RestAdapterLayerClass"]

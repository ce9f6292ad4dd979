from .application_layer_class import ApplicationLayerClass

__all__ = ["ApplicationLayerClass"]

from .domain_model_layer_class import DomainModelLayerClass

__all__ = ["DomainModelLayerClass"]

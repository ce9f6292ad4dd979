from .domain_service_layer_class import DomainServiceLayerClass

__all__ = ["DomainServiceLayerClass"]

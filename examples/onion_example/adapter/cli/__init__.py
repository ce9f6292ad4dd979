from .cli_adapter_layer_class import CliAdapterLayerClass

__all__ = ["CliAdapterLayerClass"]

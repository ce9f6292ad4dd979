"""A domain service holding one reference to every layer.

Only the references to the domain model and to itself are allowed; the
application and adapter references are onion architecture violations.
"""
from typing import Optional

from onion_example.adapter.cli.cli_adapter_layer_class import CliAdapterLayerClass
from onion_example.adapter.persistence.persistence_adapter_layer_class import PersistenceAdapterLayerClass
from onion_example.adapter.rest.rest_adapter_layer_class import RestAdapterLayerClass
from onion_example.application.application_layer_class import ApplicationLayerClass
from onion_example.domain.model.domain_model_layer_class import DomainModelLayerClass


class DomainServiceLayerClass:
    def __init__(
        self,
        domain_model_layer_class: DomainModelLayerClass,
        application_layer_class: ApplicationLayerClass,
        cli_adapter_layer_class: CliAdapterLayerClass,
        persistence_adapter_layer_class: PersistenceAdapterLayerClass,
        rest_adapter_layer_class: RestAdapterLayerClass,
        domain_service_layer_class: Optional["DomainServiceLayerClass"] = None,
    ):
        self.domain_model_layer_class = domain_model_layer_class
        self.domain_service_layer_class = domain_service_layer_class or self
        self.application_layer_class = application_layer_class
        self.cli_adapter_layer_class = cli_adapter_layer_class
        self.persistence_adapter_layer_class = persistence_adapter_layer_class
        self.rest_adapter_layer_class = rest_adapter_layer_class

    def _call(self) -> None:
        self.domain_model_layer_class.call_me()
        self.domain_service_layer_class.call_me()
        self.application_layer_class.call_me()
        self.cli_adapter_layer_class.call_me()
        self.persistence_adapter_layer_class.call_me()
        self.rest_adapter_layer_class.call_me()

    def call_me(self) -> None:
        pass

# afm_checker/adapters/base.py
# Інтерфейс транспорту до реєстру: один виклик на операцію

from typing import Any, Protocol


class RegistryTransport(Protocol):
    def afm_method(self, input_rec: dict) -> Any:
        """rgWsPublic2AfmMethod; raises TransportFault when the call fails."""
        ...

    def version_info(self) -> Any: ...

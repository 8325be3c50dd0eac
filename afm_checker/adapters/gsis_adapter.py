# afm_checker/adapters/gsis_adapter.py
# SOAP client for the AADE/GSIS RgWsPublic2 service (zeep + WS-Security UsernameToken)

import logging
from typing import Any, Mapping, Optional

from requests.exceptions import RequestException
from zeep import Client, Settings
from zeep.exceptions import Error as ZeepError
from zeep.exceptions import Fault, TransportError
from zeep.transports import Transport
from zeep.wsdl.bindings.soap import Soap12Binding
from zeep.wsse.username import UsernameToken

from ..exceptions import TransportFault
from ..utils.http import build_session

logger = logging.getLogger(__name__)

GSIS_WSDL = "https://www1.gsis.gr/wsaade/RgWsPublic2/RgWsPublic2?WSDL"
GSIS_ENDPOINT = "https://www1.gsis.gr/wsaade/RgWsPublic2/RgWsPublic2"

AFM_OPERATION = "rgWsPublic2AfmMethod"
INFO_OPERATION = "rgWsPublic2VersionInfo"


class GsisAdapter:
    SOURCE = "gsis"

    def __init__(
        self,
        username: str,
        password: str,
        wsdl: str = None,
        endpoint: str = None,
        timeout: int = 20,
        operation_timeout: int = 30,
        proxies: Optional[dict] = None,
    ):
        self.username = username
        self.password = password
        self.wsdl = wsdl or GSIS_WSDL
        self.endpoint = endpoint
        self.timeout = timeout
        self.operation_timeout = operation_timeout
        self.proxies = proxies or {}
        self.client = None
        self._service = None

    @classmethod
    def from_config(cls, cfg: Mapping) -> "GsisAdapter":
        proxies = {}
        if cfg.get("HTTP_PROXY"):
            proxies["http"] = cfg["HTTP_PROXY"]
        if cfg.get("HTTPS_PROXY"):
            proxies["https"] = cfg["HTTPS_PROXY"]
        return cls(
            username=cfg.get("GSIS_USERNAME", ""),
            password=cfg.get("GSIS_PASSWORD", ""),
            wsdl=cfg.get("GSIS_WSDL") or GSIS_WSDL,
            endpoint=cfg.get("GSIS_ENDPOINT") or None,
            timeout=int(cfg.get("EXTERNAL_REQUEST_TIMEOUT", 20)),
            operation_timeout=int(cfg.get("EXTERNAL_OPERATION_TIMEOUT", 30)),
            proxies=proxies,
        )

    def _binding_name(self) -> str:
        bindings = self.client.wsdl.bindings
        for name, binding in bindings.items():
            if isinstance(binding, Soap12Binding):
                return str(name)
        return str(next(iter(bindings)))

    def _ensure_client(self):
        if self._service is not None:
            return
        session = build_session(self.proxies)
        transport = Transport(session=session, timeout=self.timeout, operation_timeout=self.operation_timeout)
        settings = Settings(strict=False, xml_huge_tree=True)
        try:
            self.client = Client(
                wsdl=self.wsdl,
                wsse=UsernameToken(self.username, self.password),
                transport=transport,
                settings=settings,
            )
            if self.endpoint:
                self._service = self.client.create_service(self._binding_name(), self.endpoint)
            else:
                self._service = self.client.service
        except (ZeepError, RequestException, OSError) as e:
            logger.error("GSIS client init failed: %s", e)
            self.client = None
            raise TransportFault(f"GSIS client init failed: {e}") from e

    def _call(self, operation: str, **kwargs) -> Any:
        self._ensure_client()
        try:
            return getattr(self._service, operation)(**kwargs)
        except Fault as e:
            logger.warning("GSIS SOAP Fault in %s: %s", operation, e.message)
            raise TransportFault(e.message, code=e.code) from e
        except TransportError as e:
            logger.warning("GSIS transport error in %s: %s", operation, e)
            raise TransportFault(f"Transport Error: {e.message}", code=e.status_code) from e
        except ZeepError as e:
            # unparseable or invalid SOAP reply (XMLParseError, ValidationError, ...)
            logger.warning("GSIS SOAP error in %s: %s", operation, e)
            raise TransportFault(f"SOAP error: {e}") from e
        except RequestException as e:
            logger.warning("GSIS request failed in %s: %s", operation, e)
            raise TransportFault(f"Request failed: {e}") from e

    def afm_method(self, input_rec: dict) -> Any:
        return self._call(AFM_OPERATION, INPUT_REC=input_rec)

    def version_info(self) -> Any:
        return self._call(INFO_OPERATION)

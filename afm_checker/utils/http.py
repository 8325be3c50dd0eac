from typing import Optional

from requests import Session


def build_session(proxies: Optional[dict] = None) -> Session:
    """requests session for the SOAP transport.

    Without configured proxies the system env proxies are ignored. No retries:
    a failed call surfaces immediately.
    """
    s = Session()
    if proxies:
        s.proxies.update({k: v for k, v in proxies.items() if v})
    else:
        s.trust_env = False
        s.proxies = {"http": None, "https": None}
    return s

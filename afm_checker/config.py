# afm_checker/config.py
# Конфігурація: облікові дані GSIS, endpoint, таймаути, формат виводу (.env)

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    ENV = os.getenv("FLASK_ENV", "development")
    APP_NAME = "AFM Checker"

    # GSIS / AADE RgWsPublic2 (tokens from the AADE special-access console)
    GSIS_USERNAME = os.getenv("GSIS_USERNAME", "")
    GSIS_PASSWORD = os.getenv("GSIS_PASSWORD", "")
    GSIS_WSDL = os.getenv("GSIS_WSDL", "https://www1.gsis.gr/wsaade/RgWsPublic2/RgWsPublic2?WSDL")
    GSIS_ENDPOINT = os.getenv("GSIS_ENDPOINT", "https://www1.gsis.gr/wsaade/RgWsPublic2/RgWsPublic2")

    # Default requester AFM; empty means the token owner asks for themselves
    AFM_CALLED_BY = os.getenv("AFM_CALLED_BY", "")

    # Presentation
    ACTIVITY_SEPARATOR = os.getenv("ACTIVITY_SEPARATOR", ".")
    OUTPUT_FORMAT = os.getenv("OUTPUT_FORMAT", "json")

    # HTTP
    EXTERNAL_REQUEST_TIMEOUT = int(os.getenv("EXTERNAL_REQUEST_TIMEOUT", "20"))
    EXTERNAL_OPERATION_TIMEOUT = int(os.getenv("EXTERNAL_OPERATION_TIMEOUT", "30"))
    HTTP_PROXY = os.getenv('HTTP_PROXY', '')
    HTTPS_PROXY = os.getenv('HTTPS_PROXY', '')

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

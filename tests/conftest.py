import copy

import pytest

from afm_checker import create_app
from afm_checker.exceptions import TransportFault


class TestConfig:
    TESTING = True
    GSIS_USERNAME = "user"
    GSIS_PASSWORD = "secret"
    AFM_CALLED_BY = ""
    ACTIVITY_SEPARATOR = "."
    OUTPUT_FORMAT = "json"


CALLER_REC = {
    "token_username": "TESTUSER01",
    "token_afm": "123456789   ",
    "token_afm_fullname": "ΠΑΠΑΔΟΠΟΥΛΟΣ ΓΕΩΡΓΙΟΣ",
    "afm_called_by": " 123456789",
    "afm_called_by_fullname": "ΠΑΠΑΔΟΠΟΥΛΟΣ ΓΕΩΡΓΙΟΣ",
    "as_on_date": "2024-05-17",
}

BASIC_REC = {
    "afm": "094014201 ",
    "doy": "1159",
    "doy_descr": "ΦΑΕ ΑΘΗΝΩΝ",
    "i_ni_flag_descr": "ΜΗ ΦΠ ",
    "deactivation_flag": "1",
    "deactivation_flag_descr": "ΕΝΕΡΓΟΣ ΑΦΜ ",
    "firm_flag_descr": "ΕΠΙΤΗΔΕΥΜΑΤΙΑΣ ",
    "onomasia": "ΔΟΚΙΜΑΣΤΙΚΗ ΑΝΩΝΥΜΗ ΕΤΑΙΡΕΙΑ",
    "commer_title": "ΔΟΚΙΜΗ Α.Ε.",
    "legal_status_descr": "ΑΕ ",
    "postal_address": "ΠΑΝΕΠΙΣΤΗΜΙΟΥ",
    "postal_address_no": "10 ",
    "postal_zip_code": "10671",
    "postal_area_description": "ΑΘΗΝΑ",
    "regist_date": "1998-01-02",
    "stop_date": None,
    "normal_vat_system_flag": "Y",
}

ACT_47 = {
    "firm_act_code": 47910000,
    "firm_act_descr": "ΛΙΑΝΙΚΟ ΕΜΠΟΡΙΟ ΜΕΣΩ ΤΑΧΥΔΡΟΜΕΙΟΥ Ή ΜΕΣΩ ΔΙΑΔΙΚΤΥΟΥ",
    "firm_act_kind": "47",
    "firm_act_kind_descr": "ΛΙΑΝΙΚΟ ΕΜΠΟΡΙΟ",
}

ACT_46 = {
    "firm_act_code": 46900000,
    "firm_act_descr": "ΧΟΝΔΡΙΚΟ ΕΜΠΟΡΙΟ ΜΗ ΕΞΕΙΔΙΚΕΥΜΕΝΟ",
    "firm_act_kind": "46",
    "firm_act_kind_descr": "ΧΟΝΔΡΙΚΟ ΕΜΠΟΡΙΟ",
}


def make_reply(error_code=None, error_descr=None, basic=None, activities="default", wrap=True):
    """Serialized rgWsPublic2AfmMethod reply, as zeep.helpers.serialize_object returns it."""
    body = {
        "call_seq_id": 36720432,
        "error_rec": {"error_code": error_code, "error_descr": error_descr},
        "afm_called_by_rec": copy.deepcopy(CALLER_REC),
        "basic_rec": copy.deepcopy(BASIC_REC) if basic is None else basic,
    }
    if activities == "default":
        body["firm_act_tab"] = {"item": [copy.deepcopy(ACT_47), copy.deepcopy(ACT_46)]}
    elif activities is not None:
        body["firm_act_tab"] = activities
    if not wrap:
        return body
    return {"result": {"rg_ws_public2_result_rtType": body}}


class FakeTransport:
    def __init__(self, reply=None, info=None, fault=None):
        self.reply = reply
        self.info = info
        self.fault = fault
        self.calls = []

    def afm_method(self, input_rec):
        self.calls.append(("afm_method", input_rec))
        if self.fault:
            raise self.fault
        return self.reply

    def version_info(self):
        self.calls.append(("version_info", None))
        if self.fault:
            raise self.fault
        return self.info


@pytest.fixture
def transport():
    return FakeTransport(reply=make_reply(), info={"result": "RgWsPublic2 v.1.0.3 (2018-07-01)"})


@pytest.fixture
def failing_transport():
    return FakeTransport(fault=TransportFault("Authentication failed", code="env:Client"))


@pytest.fixture
def app(transport):
    app = create_app(TestConfig, transport=transport)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()

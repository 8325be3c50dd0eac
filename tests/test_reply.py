import pytest

from afm_checker.exceptions import MalformedReplyError
from afm_checker.models import RawActivityItem
from afm_checker.services.reply import coerce_activities, parse_reply, unwrap_result

from conftest import ACT_46, ACT_47, make_reply


def test_unwraps_result_envelopes():
    wrapped = make_reply()
    assert unwrap_result(wrapped) == make_reply(wrap=False)
    assert unwrap_result({"rg_ws_public2_result_rtType": make_reply(wrap=False)})["call_seq_id"] == 36720432


def test_unwrap_rejects_non_record():
    with pytest.raises(MalformedReplyError):
        unwrap_result({"result": "nope"})


def test_parse_reply_fields():
    raw = parse_reply(make_reply())
    assert raw.call_seq_id == 36720432
    assert raw.error_code is None
    assert raw.caller.token_username == "TESTUSER01"
    assert raw.basic["onomasia"] == "ΔΟΚΙΜΑΣΤΙΚΗ ΑΝΩΝΥΜΗ ΕΤΑΙΡΕΙΑ"
    assert len(raw.activities) == 2
    assert all(isinstance(a, RawActivityItem) for a in raw.activities)


def test_missing_activity_tab_is_none():
    assert parse_reply(make_reply(activities=None)).activities is None
    assert coerce_activities(None) is None


def test_single_activity_object_becomes_one_element_sequence():
    single = coerce_activities({"item": dict(ACT_47)})
    listed = coerce_activities({"item": [dict(ACT_47)]})
    assert single == listed
    assert single[0].firm_act_code == 47910000


def test_bare_list_and_empty_item():
    assert len(coerce_activities([ACT_47, ACT_46])) == 2
    assert coerce_activities({"item": None}) == ()
    assert coerce_activities({"item": []}) == ()


@pytest.mark.parametrize("tab", ["47910000", 5, {"items": []}, {"item": "x"}, {"item": [None]}, {"item": [{"firm_act_descr": "no code"}]}])
def test_unrecognized_activity_shapes_fail_loudly(tab):
    with pytest.raises(MalformedReplyError):
        coerce_activities(tab)


def test_missing_caller_record_fails():
    body = make_reply(wrap=False)
    del body["afm_called_by_rec"]
    with pytest.raises(MalformedReplyError):
        parse_reply(body)


def test_error_reply_without_basic_record():
    raw = parse_reply(make_reply(error_code="RG_WS_PUBLIC_AFM_CALLED_BY_NOT_FOUND", error_descr="Ο ΑΦΜ δεν βρέθηκε", basic={}, activities=None))
    assert raw.error_code == "RG_WS_PUBLIC_AFM_CALLED_BY_NOT_FOUND"
    assert raw.error_descr == "Ο ΑΦΜ δεν βρέθηκε"

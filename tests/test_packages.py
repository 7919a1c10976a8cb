import pytest

from balikobot.core.errors import (
    CarrierRejectedError,
    EmptyResponseError,
    MalformedResponseError,
)


def test_add_packages_strips_item_status(make_balikobot):
    balikobot, requester = make_balikobot(200, {"0": {"package_id": 5, "status": 200}})

    added = balikobot.add_packages("cp", [{"eid": "A1", "service_type": "NP"}])

    assert requester.calls == [("https://api.balikobot.cz/cp/add", [{"eid": "A1", "service_type": "NP"}])]
    assert added.shipper == "cp"
    assert len(added.packages) == 1
    package = added.packages[0]
    assert package.package_id == 5
    assert "status" not in package.raw_fields
    assert package.raw_fields == {"package_id": 5}


def test_add_packages_keeps_labels_url(make_balikobot):
    balikobot, _ = make_balikobot(200, {
        "status": 200,
        "labels_url": "https://pdf.balikobot.cz/cp/abc",
        "0": {
            "package_id": 42,
            "carrier_id": "DR0123456789C",
            "label_url": "https://pdf.balikobot.cz/cp/42",
            "track_url": "https://track",
            "status": 200,
        },
        "1": {"package_id": 43, "carrier_id": 998, "status": "200"},
    })

    added = balikobot.add_packages("cp", [{}, {}])

    assert added.labels_url == "https://pdf.balikobot.cz/cp/abc"
    assert added.package_ids == (42, 43)
    assert added.packages[0].carrier_id == "DR0123456789C"
    assert added.packages[0].label_url == "https://pdf.balikobot.cz/cp/42"
    assert added.packages[0].raw_fields["track_url"] == "https://track"
    assert added.packages[1].carrier_id == "998"


def test_add_packages_without_items_is_empty_response(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 200})
    with pytest.raises(EmptyResponseError):
        balikobot.add_packages("cp", [{}])


def test_add_packages_without_package_id_is_rejected(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 200, "0": {"status": 200}})
    with pytest.raises(CarrierRejectedError):
        balikobot.add_packages("cp", [{}])


def test_add_packages_later_item_without_package_id_is_rejected(make_balikobot):
    balikobot, _ = make_balikobot(200, {
        "status": 200,
        "0": {"package_id": 1, "status": 200},
        "1": {"status": 200, "eid": "B"},
    })
    with pytest.raises(CarrierRejectedError) as exc_info:
        balikobot.add_packages("cp", [{}, {}])
    assert exc_info.value.response["1"] == {"status": 200, "eid": "B"}


def test_add_packages_item_error_is_rejected(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 200, "0": {"status": 409, "package_id": 1}})
    with pytest.raises(CarrierRejectedError):
        balikobot.add_packages("cp", [{}])


def test_drop_packages_with_empty_list_makes_no_call(make_balikobot):
    balikobot, requester = make_balikobot(200, {"status": 200})
    assert balikobot.drop_packages("cp", []) is None
    assert requester.calls == []


def test_drop_package_sends_single_item_batch(make_balikobot):
    balikobot, requester = make_balikobot(200, {"status": 200})
    balikobot.drop_package("cp", 1)
    assert requester.calls == [("https://api.balikobot.cz/cp/drop", [{"id": 1}])]


def test_drop_packages_rejected(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 404})
    with pytest.raises(CarrierRejectedError):
        balikobot.drop_packages("cp", [1, 2])


def test_track_package_returns_status_records(make_balikobot):
    balikobot, requester = make_balikobot(200, {
        "status": 200,
        "0": [
            {"date": "2018-11-07 14:15:01", "name": "Doručování zásilky", "status_id": 2},
            {"date": "2018-11-08 18:00:00", "name": "Dodání zásilky", "status_id": 1},
        ],
    })

    shipment = balikobot.track_package("cp", "DR0123456789C")

    assert requester.calls == [("https://apiv2.balikobot.cz/cp/track", [{"id": "DR0123456789C"}])]
    assert shipment.carrier_id == "DR0123456789C"
    assert [record.status_id for record in shipment.status_records] == [2, 1]
    assert shipment.status_records[0].name == "Doručování zásilky"
    assert shipment.status_records[0].date == "2018-11-07 14:15:01"


def test_track_package_without_first_item_is_empty_response(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 200, "0": []})
    with pytest.raises(EmptyResponseError):
        balikobot.track_package("cp", "1")


def test_track_package_requires_status(make_balikobot):
    balikobot, _ = make_balikobot(200, {"0": [{"name": "x"}]})
    with pytest.raises(MalformedResponseError):
        balikobot.track_package("cp", "1")


def test_last_status_renames_fields(make_balikobot):
    balikobot, requester = make_balikobot(200, [
        {"status_id": 1, "status_text": "Zásilka byla doručena příjemci."},
    ])

    status = balikobot.track_package_last_status("cp", "1")

    assert requester.calls[0][0] == "https://api.balikobot.cz/cp/trackstatus"
    assert status.name == "Zásilka byla doručena příjemci."
    assert status.status_id == 1
    assert status.date is None


def test_last_status_item_error_is_rejected(make_balikobot):
    balikobot, _ = make_balikobot(200, [{"status": 503, "status_id": 1, "status_text": "x"}])
    with pytest.raises(CarrierRejectedError):
        balikobot.track_package_last_status("cp", "1")


def test_last_status_without_item_is_empty_response(make_balikobot):
    balikobot, _ = make_balikobot(200, [])
    with pytest.raises(EmptyResponseError):
        balikobot.track_package_last_status("cp", "1")


def test_get_labels(make_balikobot):
    balikobot, requester = make_balikobot(200, {"status": 200, "labels_url": "https://pdf/labels"})
    assert balikobot.get_labels("ppl", [1, 2]) == "https://pdf/labels"
    assert requester.calls == [("https://api.balikobot.cz/ppl/labels", {"package_ids": [1, 2]})]


def test_get_labels_without_url_is_malformed(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 200})
    with pytest.raises(MalformedResponseError):
        balikobot.get_labels("ppl", [1])


def test_get_package_info_uses_id_suffix(make_balikobot):
    body = {"package_id": 1, "eid": "X", "rec_name": "Jan"}
    balikobot, requester = make_balikobot(200, body)
    assert balikobot.get_package_info("cp", 1) == body
    assert requester.calls[0][0] == "https://api.balikobot.cz/cp/package/1"


def test_get_overview_does_not_require_status(make_balikobot):
    body = [{"package_id": 1}, {"package_id": 2}]
    balikobot, requester = make_balikobot(200, body)
    assert balikobot.get_overview("cp") == body
    assert requester.calls == [("https://api.balikobot.cz/cp/overview", [])]


def test_get_overview_keeps_status_field(make_balikobot):
    body = {"status": 200, "0": {"package_id": 1}}
    balikobot, _ = make_balikobot(200, body)
    assert balikobot.get_overview("cp") == {"status": 200, "0": {"package_id": 1}}


def test_check_packages(make_balikobot):
    balikobot, requester = make_balikobot(200, {"status": 200})
    assert balikobot.check_packages("cp", [{"eid": "1"}]) is None
    assert requester.calls == [("https://api.balikobot.cz/cp/check", [{"eid": "1"}])]


def test_check_packages_rejected(make_balikobot):
    balikobot, _ = make_balikobot(200, {"status": 400, "0": {"status": 406}})
    with pytest.raises(CarrierRejectedError) as exc_info:
        balikobot.check_packages("cp", [{}])
    assert exc_info.value.errors == {0: 406}

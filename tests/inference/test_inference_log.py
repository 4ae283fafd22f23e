from twsizes.inference_log import InferenceLog


def test_events_are_numbered_in_order() -> None:
    log = InferenceLog()
    first = log.debug("token applied", token="w-10")
    second = log.warn("base width could not be inferred")
    assert first == {"id": "log:0001", "level": "debug", "message": "token applied", "fields": {"token": "w-10"}}
    assert second == {"id": "log:0002", "level": "warn", "message": "base width could not be inferred"}
    assert log.snapshot() == [first, second]


def test_unknown_levels_fall_back_to_info() -> None:
    log = InferenceLog()
    event = log.record(level=" TRACE ", message="x")
    assert event["level"] == "info"
    assert log.messages("info") == ["x"]
    assert log.messages("warn") == []


def test_snapshot_is_a_copy() -> None:
    log = InferenceLog()
    log.info("one")
    snapshot = log.snapshot()
    snapshot.clear()
    assert len(log.snapshot()) == 1

import logging
import sys

from gui.services.error_handling_service import ErrorHandlingService
from gui.services.event_bus import EventBus, GUIEvent
from gui.services.logging_service import LoggingService


def _raise_and_capture(svc, exc):
    try:
        raise exc
    except Exception as e:  # noqa: BLE001
        return svc.handle_exception(type(e), e, e.__traceback__)


def test_handle_exception_records_and_limits():
    svc = ErrorHandlingService(capacity=2)
    _raise_and_capture(svc, ValueError("boom1"))
    _raise_and_capture(svc, RuntimeError("boom2"))
    _raise_and_capture(svc, KeyError("boom3"))
    errs = svc.recent_errors()
    assert len(errs) == 2
    assert errs[0].exc_type is RuntimeError
    assert errs[-1].exc_type is KeyError
    svc.clear()
    assert svc.recent_errors() == []


def test_record_contents():
    svc = ErrorHandlingService()
    record = _raise_and_capture(svc, ValueError("bad image"))
    assert "ValueError: bad image" in record.traceback_str
    assert record.summary() == "ValueError: bad image"
    assert record.thread_name == "MainThread"
    assert record.iso_time.endswith("+00:00")


def test_logging_integration():
    logging_svc = LoggingService(capacity=5)
    logging_svc.attach_root()
    try:
        _raise_and_capture(ErrorHandlingService(), AssertionError("failure"))
    finally:
        logging_svc.detach_root()
    recs = logging_svc.filter(level="ERROR")
    assert any("Uncaught exception" in r.message for r in recs)


def test_event_bus_emission():
    bus = EventBus()
    received = []
    bus.subscribe(GUIEvent.UNCAUGHT_EXCEPTION, lambda evt: received.append(evt.payload))
    _raise_and_capture(ErrorHandlingService(event_bus=bus), RuntimeError("hazard"))
    assert received and received[0]["type"] == "RuntimeError"
    assert received[0]["message"] == "hazard"


def test_install_and_uninstall_restore_hook():
    original = sys.excepthook
    svc = ErrorHandlingService()
    svc.install()
    try:
        assert svc.installed
        assert sys.excepthook is not original
        svc.install()  # idempotent
    finally:
        svc.uninstall()
    assert sys.excepthook is original
    assert not svc.installed

from pathlib import Path

from lce.domain.models import Capabilities, Document, OpenResult, UiState


def test_document_defaults():
    d = Document()
    assert d.text == ""
    assert d.filename == ""
    assert d.source is None


def test_ui_state_modal_visible():
    ui = UiState()
    assert ui.modal_visible is False
    ui.open_dialog_visible = True
    assert ui.modal_visible is True
    ui.open_dialog_visible = False
    ui.alert_message = "hi"
    assert ui.modal_visible is True


def test_capabilities_variants():
    full = Capabilities()
    assert (full.can_open, full.can_save, full.can_resave) == (True, True, True)
    lite = Capabilities.save_only()
    assert (lite.can_open, lite.can_save, lite.can_resave) == (False, True, False)


def test_open_result_failed():
    r = OpenResult.failed()
    assert r.ok is False
    assert r.display_name == ""
    assert r.location is None

    ok = OpenResult(text="", display_name="a.txt", location=Path("a.txt"))
    assert ok.ok is True  # empty file is still a successful open

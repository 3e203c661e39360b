import pytest

from astrocelerate.panels import (
    MAX_PANEL_COUNT,
    PANEL_NULL,
    PanelMask,
    PanelRegistry,
    Toggle,
)


def test_first_panel_gets_id_after_null():
    registry = PanelRegistry()
    assert registry.register_panel("Console") == PANEL_NULL + 1


def test_register_same_name_returns_same_id():
    registry = PanelRegistry()
    first = registry.register_panel("Console")
    other = registry.register_panel("Telemetry")
    assert registry.register_panel("Console") == first
    assert other != first


def test_panel_name_round_trip_and_unknown():
    registry = PanelRegistry()
    panel = registry.register_panel("Details")
    assert registry.panel_name(panel) == "Details"
    assert registry.panel_name(PANEL_NULL) == "Unknown Panel"
    assert registry.panel_name(panel + 5) == "Unknown Panel"


def test_instanced_flag():
    registry = PanelRegistry()
    details = registry.register_panel("Details", instanced=True)
    console = registry.register_panel("Console")
    assert registry.is_instanced(details) is True
    assert registry.is_instanced(console) is False


def test_registry_full_returns_null_panel():
    registry = PanelRegistry()
    ids = [registry.register_panel(f"p{i}") for i in range(MAX_PANEL_COUNT)]
    assert len(set(ids)) == MAX_PANEL_COUNT
    assert registry.register_panel("overflow") == PANEL_NULL


def test_toggle_on_and_off():
    mask = PanelMask()
    mask.toggle(3, Toggle.ON)
    assert mask.is_open(3) is True
    assert mask.is_open(2) is False
    mask.toggle(3, Toggle.OFF)
    assert mask.is_open(3) is False


def test_null_panel_is_never_open():
    mask = PanelMask()
    mask.toggle(PANEL_NULL, Toggle.ON)
    assert mask.is_open(PANEL_NULL) is False
    assert mask.bits == 0


def test_out_of_range_panel_raises():
    mask = PanelMask()
    with pytest.raises(IndexError):
        mask.toggle(MAX_PANEL_COUNT, Toggle.ON)
    with pytest.raises(IndexError):
        mask.is_open(MAX_PANEL_COUNT)


def test_serialize_round_trip():
    mask = PanelMask()
    for panel in (0, 7, 200, MAX_PANEL_COUNT - 1):
        mask.toggle(panel, Toggle.ON)
    text = mask.serialize()
    assert len(text) == MAX_PANEL_COUNT
    assert text[0] == "1" and text[-1] == "1"
    assert PanelMask.deserialize(text) == mask


def test_deserialize_short_string_sets_low_bits():
    mask = PanelMask.deserialize("10")
    assert mask.is_open(1) is True
    assert mask.is_open(0) is False


def test_deserialize_rejects_other_characters():
    with pytest.raises(ValueError):
        PanelMask.deserialize("10x1")
import pytest

from astrocelerate.logging_manager import EngineError
from astrocelerate.services import ServiceLocator


class Base:
    pass


class Impl(Base):
    pass


def test_register_and_get():
    locator = ServiceLocator()
    service = Impl()
    locator.register(service)
    assert locator.get(Impl) is service


def test_register_under_explicit_type():
    locator = ServiceLocator()
    service = Impl()
    locator.register(service, Base)
    assert locator.get(Base) is service
    with pytest.raises(EngineError):
        locator.get(Impl)


def test_missing_service_names_caller():
    locator = ServiceLocator()
    with pytest.raises(EngineError) as info:
        locator.get(Base, "some_caller")
    assert "Base" in str(info.value)
    assert "some_caller" in str(info.value)


def test_register_overwrites():
    locator = ServiceLocator()
    first, second = Impl(), Impl()
    locator.register(first)
    locator.register(second)
    assert locator.get(Impl) is second


def test_clear_removes_services():
    locator = ServiceLocator()
    locator.register(Impl())
    locator.clear()
    with pytest.raises(EngineError):
        locator.get(Impl)
import pytest

from fabrica.client import exercise_devices
from fabrica.core.interfaces.device import SmartPhone, Tablet
from fabrica.devices import get_device_factory
from fabrica.devices.samsung import SamsungFactory


@pytest.mark.parametrize("family", ["apple", "samsung"])
def test_factory_builds_matching_family(family):
    factory = get_device_factory(family)
    phone = factory.create_smartphone()
    tablet = factory.create_tablet()
    assert isinstance(phone, SmartPhone)
    assert isinstance(tablet, Tablet)
    assert phone.brand == tablet.brand == family
    assert phone.switch_on() is True
    assert tablet.switch_on() is True


def test_ringtones_differ_between_families():
    apple = get_device_factory("apple").create_smartphone().ring()
    samsung = get_device_factory("samsung").create_smartphone().ring()
    assert apple != samsung


def test_unknown_family_falls_back_to_samsung():
    assert isinstance(get_device_factory("nokia"), SamsungFactory)


def test_exercise_devices_reports_both_products():
    report = exercise_devices(get_device_factory("apple"))
    assert report == ["apple smartphone rings: Opening", "apple tablet on"]

import pytest

from vintfkit import flags
from vintfkit.flags import CheckField, CheckFlags, SerializeField, SerializeFlags


def test_check_flag_constants():
    assert flags.ENABLE_ALL_CHECKS.is_enabled(CheckField.AVB)
    assert flags.ENABLE_ALL_CHECKS.is_enabled(CheckField.RUNTIME_INFO)
    assert not flags.DISABLE_AVB_CHECK.is_enabled(CheckField.AVB)
    assert flags.DISABLE_AVB_CHECK.is_enabled(CheckField.RUNTIME_INFO)
    assert flags.DISABLE_RUNTIME_INFO.is_enabled(CheckField.AVB)
    assert not flags.DISABLE_RUNTIME_INFO.is_enabled(CheckField.RUNTIME_INFO)


def test_default_checks_is_disable_avb():
    assert flags.ENABLE_ALL_CHECKS.disable(CheckField.AVB) == flags.DEFAULT_CHECKS
    assert not flags.DEFAULT_CHECKS.is_enabled(CheckField.AVB)
    assert flags.DEFAULT_CHECKS.is_enabled(CheckField.RUNTIME_INFO)
    assert flags.DEFAULT_CHECKS.is_enabled(CheckField.KERNEL)


@pytest.mark.parametrize("field", list(CheckField))
def test_disable_all_checks(field):
    assert not flags.DISABLE_ALL_CHECKS.is_enabled(field)


@pytest.mark.parametrize("field", list(CheckField))
def test_check_enable_disable_round_trip(field):
    start = flags.ENABLE_ALL_CHECKS
    assert start.disable(field).enable(field) == start
    assert not start.disable(field).is_enabled(field)
    assert CheckFlags(0).enable(field).is_enabled(field)


def test_check_flags_are_immutable():
    f = CheckFlags(0)
    f.enable(CheckField.KERNEL)
    assert not f.is_enabled(CheckField.KERNEL)


def test_serialize_flag_constants():
    assert flags.EVERYTHING.is_enabled(SerializeField.HALS)
    assert flags.EVERYTHING.is_enabled(SerializeField.META_VERSION)
    assert not flags.NO_HALS.is_enabled(SerializeField.HALS)
    assert flags.NO_HALS.is_enabled(SerializeField.AVB)
    assert flags.NO_HALS.is_enabled(SerializeField.META_VERSION)
    assert not flags.NO_TAGS.is_enabled(SerializeField.HALS)
    assert flags.NO_TAGS.is_enabled(SerializeField.META_VERSION)
    assert flags.HALS_ONLY.is_enabled(SerializeField.HALS)
    assert not flags.HALS_ONLY.is_enabled(SerializeField.AVB)
    assert flags.HALS_ONLY.is_enabled(SerializeField.META_VERSION)


def test_hals_only_versus_hals_no_fqname():
    assert flags.HALS_ONLY.is_enabled(SerializeField.FQNAME)
    assert not flags.HALS_NO_FQNAME.is_enabled(SerializeField.FQNAME)
    assert flags.HALS_NO_FQNAME.is_enabled(SerializeField.HALS)


@pytest.mark.parametrize(
    "constant, field",
    [
        (flags.XMLFILES_ONLY, SerializeField.XML_FILES),
        (flags.SEPOLICY_ONLY, SerializeField.SEPOLICY),
        (flags.VNDK_ONLY, SerializeField.VNDK),
        (flags.SSDK_ONLY, SerializeField.SSDK),
    ],
)
def test_only_constants(constant, field):
    assert constant.is_enabled(field)
    assert constant.is_enabled(SerializeField.SCHEMA_TYPE)
    others = [f for f in SerializeField if f not in (field, SerializeField.META_VERSION, SerializeField.SCHEMA_TYPE)]
    assert not any(constant.is_enabled(f) for f in others)


@pytest.mark.parametrize(
    "constant, field",
    [
        (flags.NO_AVB, SerializeField.AVB),
        (flags.NO_SEPOLICY, SerializeField.SEPOLICY),
        (flags.NO_VNDK, SerializeField.VNDK),
        (flags.NO_KERNEL, SerializeField.KERNEL),
        (flags.NO_XMLFILES, SerializeField.XML_FILES),
        (flags.NO_SSDK, SerializeField.SSDK),
        (flags.NO_FQNAME, SerializeField.FQNAME),
        (flags.NO_KERNEL_CONFIGS, SerializeField.KERNEL_CONFIGS),
        (flags.NO_KERNEL_MINOR_REVISION, SerializeField.KERNEL_MINOR_REVISION),
    ],
)
def test_no_constants(constant, field):
    assert not constant.is_enabled(field)
    assert constant.enable(field) == flags.EVERYTHING


def test_serialize_value_is_32_bit():
    assert flags.EVERYTHING.value == 0xFFFFFFFF
    assert SerializeFlags(~0) == flags.EVERYTHING
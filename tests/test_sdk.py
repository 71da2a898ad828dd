from vintfkit.sdk import Sepolicy, SystemSdk, VendorNdk, Vndk, VndkVersionRange
from vintfkit.version import VersionRange


def test_sepolicy_default():
    s = Sepolicy()
    assert s.kernel_sepolicy_version == 0
    assert s.sepolicy_versions == ()


def test_sepolicy_equality():
    ranges = [VersionRange(25, 0), VersionRange(26, 0, 3)]
    a = Sepolicy(30, ranges)
    b = Sepolicy(30, tuple(ranges))
    assert a == b
    assert not (a == Sepolicy(31, ranges))
    assert not (a == Sepolicy(30, ranges[:1]))


def test_system_sdk_empty():
    assert SystemSdk().is_empty()
    assert not SystemSdk({"P"}).is_empty()


def test_system_sdk_equality():
    assert SystemSdk({"P", "Q"}) == SystemSdk(["Q", "P"])
    assert not (SystemSdk({"P"}) == SystemSdk({"Q"}))


def test_remove_versions():
    a = SystemSdk({"P", "Q", "R"})
    b = SystemSdk({"Q"})
    result = a.remove_versions(b)
    assert result == SystemSdk({"P", "R"})
    assert a == SystemSdk({"P", "Q", "R"})


def test_remove_versions_from_self_is_empty():
    a = SystemSdk({"P", "Q"})
    assert a.remove_versions(a).is_empty()


def test_add_all_moves_versions():
    a = SystemSdk({"P"})
    b = SystemSdk({"Q", "R"})
    a.add_all(b)
    assert a.versions == {"P", "Q", "R"}
    assert b.is_empty()


def test_vendor_ndk_compares_by_version_only():
    assert VendorNdk("27", {"libfoo.so"}) == VendorNdk("27", {"libbar.so"})
    assert not (VendorNdk("27") == VendorNdk("28"))
    assert VendorNdk("27", ["libfoo.so"]).libraries == frozenset({"libfoo.so"})


def test_vndk_version_range_single():
    r = VndkVersionRange(27, 0, 1)
    assert r.patch_max == r.patch_min
    assert r.is_single_version()
    assert not VndkVersionRange(27, 0, 1, 3).is_single_version()


def test_vndk_equality():
    r = VndkVersionRange(27, 0, 1, 3)
    assert Vndk(r, {"libjpeg.so"}) == Vndk(VndkVersionRange(27, 0, 1, 3), ["libjpeg.so"])
    assert not (Vndk(r, {"libjpeg.so"}) == Vndk(r, set()))
    assert not (Vndk(r) == Vndk(VndkVersionRange(27, 0, 1)))
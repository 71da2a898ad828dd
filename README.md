# vintfkit

vintfkit is a pure-Python library of building blocks for describing vendor
interface metadata: HAL manifests and compatibility matrices. It has no
dependencies outside the standard library.

## Modules

- `vintfkit.enums`: `Arch`, `HalFormat`, `Transport`, `Tristate`,
  `KernelConfigType`, `SchemaType`, `XmlSchemaFormat` and `Level`.
  `Arch` members combine with `|` and offer `has32()`, `has64()` and
  `contains()`. `Level` is an `IntEnum` of well-known FCM versions, with
  `UNSPECIFIED` as the largest 64-bit value. The `label` and `from_label`
  helpers convert between members and the text used in XML, such as
  `"32+64"`, `"hwbinder"` and `"aidl"`; `from_label` raises `ValueError` for
  unknown text, and both raise `TypeError` for `Level`, which has no labels.
- `vintfkit.version`: `Version` and `KernelVersion`, frozen, hashable and
  ordered; `VersionRange`, frozen and hashable, which can be tested for
  containment of a version, for support by a version and for overlap with
  another range. `VersionRange(major, minor)` is a single version.
  `META_VERSION` is `Version(2, 0)`.
- `vintfkit.transport_arch`: `TransportArch`, an ordered pair of transport and
  arch with `is_empty()` and `is_valid()` (passthrough needs an arch,
  hwbinder and no transport need none).
- `vintfkit.flags`: `CheckFlags` and `SerializeFlags`, immutable bit sets with
  `enable`, `disable` and `is_enabled`, keyed by `CheckField` and
  `SerializeField`, plus ready-made values such as `ENABLE_ALL_CHECKS`,
  `DEFAULT_CHECKS`, `EVERYTHING`, `NO_HALS`, `NO_TAGS` and `HALS_ONLY`.
- `vintfkit.sdk`: `Sepolicy`, `SystemSdk` (with `is_empty`,
  `remove_versions` and `add_all`, which moves versions out of the other
  object), `VendorNdk` (compared by version only), and the deprecated
  `Vndk` and `VndkVersionRange`.
- `vintfkit.xml_file`: `<xmlfile>` entries (`XmlFile`, `MatrixXmlFile`,
  `ManifestXmlFile`) and the `XmlFileGroup` multimap that holds them, ordered
  by name.
- `vintfkit.hal_group`: `Named`, and `HalGroup`, an abstract multimap from HAL
  name to HAL with generators over instances filtered by format, package,
  version and interface. Subclasses must implement `instances_of_version`;
  they may override `should_add` to filter what is added.

## Installation

```
pip install vintfkit
```

## Example

```python
from vintfkit.enums import Arch, Transport, label, from_label
from vintfkit.transport_arch import TransportArch
from vintfkit.version import Version, VersionRange

assert Arch.ARCH_32 | Arch.ARCH_64 == Arch.ARCH_32_64
assert Arch.ARCH_32_64.contains(Arch.ARCH_64)
assert label(Arch.ARCH_32_64) == "32+64"
assert from_label(Transport, "hwbinder") is Transport.HWBINDER

rng = VersionRange(2, 3, 7)
assert rng.contains(Version(2, 5))
assert rng.supported_by(Version(2, 9))
assert not rng.overlaps(VersionRange(1, 2, 4))

assert TransportArch(Transport.PASSTHROUGH, Arch.ARCH_64).is_valid()
assert not TransportArch(Transport.HWBINDER, Arch.ARCH_32).is_valid()
```

A conflict while merging groups raises an exception: `HalConflictError` from
`HalGroup.add_all_hals` and `XmlFileConflictError` from
`XmlFileGroup.add_all_xml_files`. The other group is emptied only when every
entry was moved.

## What it does not do

vintfkit holds the data model only. It does not read or write manifest or
compatibility matrix XML, does not define concrete manifest or matrix classes,
does not check a manifest against a matrix, and does not read anything from a
device or file system. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```
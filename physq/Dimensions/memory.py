from physq.core import DimensionalScalar, Unit, derive
from physq.dimension import Dimensions
from physq.Dimensions.temporal import TimeUnit

BYTE = 8.0
KIBI = 1024.0


class MemoryUnit(Unit):
    """
    Units of computer memory. The standard unit is the bit.

    Decimal prefixes (kilo, mega, ...) are powers of 1000 and binary prefixes (kibi, mebi, ...) are
    powers of 1024. Lowercase ``b`` denotes bits and uppercase ``B`` denotes bytes.
    """

    Bit = "b"
    Byte = "B", BYTE
    Kilobit = "kb", 1.0e3
    Kibibit = "kib", KIBI
    Kilobyte = "kB", BYTE * 1.0e3
    Kibibyte = "kiB", BYTE * KIBI
    Megabit = "Mb", 1.0e6
    Mebibit = "Mib", KIBI**2
    Megabyte = "MB", BYTE * 1.0e6
    Mebibyte = "MiB", BYTE * KIBI**2
    Gigabit = "Gb", 1.0e9
    Gibibit = "Gib", KIBI**3
    Gigabyte = "GB", BYTE * 1.0e9
    Gibibyte = "GiB", BYTE * KIBI**3
    Terabit = "Tb", 1.0e12
    Tebibit = "Tib", KIBI**4
    Terabyte = "TB", BYTE * 1.0e12
    Tebibyte = "TiB", BYTE * KIBI**4
    Petabit = "Pb", 1.0e15
    Pebibit = "Pib", KIBI**5
    Petabyte = "PB", BYTE * 1.0e15
    Pebibyte = "PiB", BYTE * KIBI**5


MemoryUnit.define(
    MemoryUnit.Bit,
    Dimensions(),
    spellings={
        MemoryUnit.Bit: ("bit", "bits"),
        MemoryUnit.Byte: ("byte", "bytes"),
        MemoryUnit.Kilobyte: ("kilobyte", "kilobytes"),
        MemoryUnit.Megabyte: ("megabyte", "megabytes"),
        MemoryUnit.Gigabyte: ("gigabyte", "gigabytes"),
        MemoryUnit.Terabyte: ("terabyte", "terabytes"),
    },
)


class MemoryRateUnit(Unit):
    """Units of data transfer rate. The standard unit is the bit per second."""

    BitPerSecond = derive("b/s", {MemoryUnit.Bit: 1, TimeUnit.Second: -1})
    BytePerSecond = derive("B/s", {MemoryUnit.Byte: 1, TimeUnit.Second: -1})
    KilobitPerSecond = derive("kb/s", {MemoryUnit.Kilobit: 1, TimeUnit.Second: -1})
    KibibitPerSecond = derive("kib/s", {MemoryUnit.Kibibit: 1, TimeUnit.Second: -1})
    KilobytePerSecond = derive("kB/s", {MemoryUnit.Kilobyte: 1, TimeUnit.Second: -1})
    KibibytePerSecond = derive("kiB/s", {MemoryUnit.Kibibyte: 1, TimeUnit.Second: -1})
    MegabitPerSecond = derive("Mb/s", {MemoryUnit.Megabit: 1, TimeUnit.Second: -1})
    MebibitPerSecond = derive("Mib/s", {MemoryUnit.Mebibit: 1, TimeUnit.Second: -1})
    MegabytePerSecond = derive("MB/s", {MemoryUnit.Megabyte: 1, TimeUnit.Second: -1})
    MebibytePerSecond = derive("MiB/s", {MemoryUnit.Mebibyte: 1, TimeUnit.Second: -1})
    GigabitPerSecond = derive("Gb/s", {MemoryUnit.Gigabit: 1, TimeUnit.Second: -1})
    GibibitPerSecond = derive("Gib/s", {MemoryUnit.Gibibit: 1, TimeUnit.Second: -1})
    GigabytePerSecond = derive("GB/s", {MemoryUnit.Gigabyte: 1, TimeUnit.Second: -1})
    GibibytePerSecond = derive("GiB/s", {MemoryUnit.Gibibyte: 1, TimeUnit.Second: -1})
    TerabitPerSecond = derive("Tb/s", {MemoryUnit.Terabit: 1, TimeUnit.Second: -1})
    TebibitPerSecond = derive("Tib/s", {MemoryUnit.Tebibit: 1, TimeUnit.Second: -1})
    TerabytePerSecond = derive("TB/s", {MemoryUnit.Terabyte: 1, TimeUnit.Second: -1})
    TebibytePerSecond = derive("TiB/s", {MemoryUnit.Tebibyte: 1, TimeUnit.Second: -1})


MemoryRateUnit.define(
    MemoryRateUnit.BitPerSecond,
    Dimensions(time=-1),
    spellings={
        MemoryRateUnit.BitPerSecond: ("bps", "bit/s"),
        MemoryRateUnit.BytePerSecond: ("byte/s",),
        MemoryRateUnit.KilobitPerSecond: ("kbps",),
        MemoryRateUnit.MegabitPerSecond: ("Mbps",),
        MemoryRateUnit.GigabitPerSecond: ("Gbps",),
    },
)


class Memory(DimensionalScalar, unit=MemoryUnit):
    """An amount of computer memory, e.g. ``Memory(4.0, MemoryUnit.Gibibyte)``."""


class MemoryRate(DimensionalScalar, unit=MemoryRateUnit):
    """A data transfer rate. The time rate of :class:`Memory`."""

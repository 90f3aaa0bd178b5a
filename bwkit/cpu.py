"""CPU characteristics: feature flags, cache descriptions and a brand string."""

from __future__ import annotations

import platform
import re
import subprocess
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from bwkit.console import Console, singleton

_MAX_CPU_STRING = 999
_BRAND_FILE = Path("/proc/cpuinfo")

# (attribute, label) in the order features are reported.
_FEATURES = (
    ("has_mmx", "MMX"),
    ("has_mmxext", "MMXEXT"),
    ("has_sse", "SSE"),
    ("has_sse2", "SSE2"),
    ("has_sse3", "SSE3"),
    ("has_ssse3", "SSSE3"),
    ("has_sse4a", "SSE4A"),
    ("has_sse41", "SSE4.1"),
    ("has_sse42", "SSE4.2"),
    ("has_aes", "AES"),
    ("has_sha", "SHA"),
    ("has_sgx", "SGX"),
    ("has_avx", "AVX"),
    ("has_avx2", "AVX2"),
    ("has_adx", "ADX"),
    ("has_bmi1", "BMI1"),
    ("has_bmi2", "BMI2"),
    ("has_hyperthreading", "HTT"),
    ("has_nx", "NX"),
    ("has_cet", "CET"),
    ("has_64bit_support", None),
    ("has_avx512_f", "AVX512_F"),
    ("has_avx512_dq", "AVX512_DQ"),
    ("has_avx512_ifma", "AVX512_IFMA"),
    ("has_avx512_pf", "AVX512_PF"),
    ("has_avx512_er", "AVX512_ER"),
    ("has_avx512_cd", "AVX512_CD"),
    ("has_avx512_bw", "AVX512_BW"),
    ("has_avx512_vl", "AVX512_VL"),
    ("has_avx512_vbmi", "AVX512_VBMI"),
    ("has_avx512_vbmi2", "AVX512_VBMI2"),
    ("has_avx512_vnni", "AVX512_VNNI"),
    ("has_avx512_bitalg", "AVX512_BITALG"),
    ("has_avx512_vpopcntdq", "AVX512_VPOPCNTDQ"),
    ("has_avx512_fp16", "AVX512_FP16"),
)

_CACHE_LEVELS = {1: "L1 ", 2: "L2 ", 3: "L3 "}
_CACHE_TYPES = {
    1: "data cache,        ",
    2: "instruction cache, ",
    3: "unified cache,     ",
}


@dataclass
class CPUCharacteristics:
    """What is known about the processor: vendor, family and feature flags."""

    cpu_family: str = ""
    is_intel: bool = False
    is_amd: bool = False
    is_arm: bool = False
    has_hyperthreading: bool = False
    has_mmx: bool = False
    has_mmxext: bool = False
    has_sse: bool = False
    has_sse2: bool = False
    has_sse3: bool = False
    has_ssse3: bool = False
    has_sse4a: bool = False
    has_sse41: bool = False
    has_sse42: bool = False
    has_aes: bool = False
    has_sha: bool = False
    has_sgx: bool = False
    has_avx: bool = False
    has_avx2: bool = False
    has_avx512_f: bool = False
    has_avx512_dq: bool = False
    has_avx512_vbmi: bool = False
    has_avx512_vbmi2: bool = False
    has_avx512_4vnniw: bool = False
    has_avx512_4fmaps: bool = False
    has_avx512_vp2intersect: bool = False
    has_avx512_vnni: bool = False
    has_avx512_bitalg: bool = False
    has_avx512_vpopcntdq: bool = False
    has_avx512_ifma: bool = False
    has_avx512_fp16: bool = False
    has_avx512_pf: bool = False
    has_avx512_er: bool = False
    has_avx512_cd: bool = False
    has_avx512_bw: bool = False
    has_avx512_vl: bool = False
    has_64bit_support: bool = False
    has_nx: bool = False
    has_adx: bool = False
    has_bmi1: bool = False
    has_bmi2: bool = False
    has_cet: bool = False
    running_in_hypervisor: bool = False

    @classmethod
    def from_features(
        cls,
        vendor: str,
        features: Iterable[str] = (),
        hypervisor: bool = False,
    ) -> "CPUCharacteristics":
        """Build the characteristics of an x86 CPU from its vendor and raw flags.

        ``features`` names flags by attribute without the ``has_`` prefix,
        e.g. ``"avx2"`` or ``"64bit_support"``. The reporting rules apply:
        AVX2 and AVX-512 count only where AVX is present, AVX-512 only on
        Intel, SSE4A only on AMD, and AVX/AVX2 are switched off on AMD.
        """
        known = {f.name for f in fields(cls)}
        wanted = set()
        for name in features:
            attribute = f"has_{name}"
            if attribute not in known:
                raise ValueError(f"unknown CPU feature {name!r}")
            wanted.add(attribute)

        cpu = cls(cpu_family=vendor[:31], running_in_hypervisor=bool(hypervisor))
        cpu.is_amd = vendor == "AuthenticAMD"
        cpu.is_intel = vendor == "GenuineIntel"

        for attribute in wanted:
            if attribute == "has_avx2" or attribute.startswith("has_avx512_"):
                continue
            setattr(cpu, attribute, True)

        if cpu.has_avx:
            cpu.has_avx2 = "has_avx2" in wanted
            if cpu.is_intel:
                for attribute in wanted:
                    if attribute.startswith("has_avx512_"):
                        setattr(cpu, attribute, True)

        cpu.has_sse4a = cpu.is_amd and "has_sse4a" in wanted
        if cpu.is_amd:
            cpu.has_avx = False
            cpu.has_avx2 = False
        return cpu

    @classmethod
    def detect(cls) -> "CPUCharacteristics":
        """Describe the running machine as far as it can be known without CPUID."""
        machine = platform.machine().lower()
        if machine in ("aarch64", "arm64"):
            return cls(cpu_family="ARM 64-bit", is_arm=True)
        if machine.startswith("arm"):
            return cls(cpu_family="ARM 32-bit", is_arm=True)
        return cls()

    def feature_names(self) -> List[str]:
        """Return the labels of the features present, in reporting order."""
        names = []
        for attribute, label in _FEATURES:
            if not getattr(self, attribute):
                continue
            if label is None:
                label = "LongMode" if self.is_amd else "Intel64"
            names.append(label)
        return names

    def characteristics_lines(self) -> List[str]:
        """Return the report lines: family, features (x86 only), hypervisor."""
        lines = [f"CPU family: {self.cpu_family}"]
        if not self.is_arm:
            lines.append("CPU features: " + "".join(f"{n} " for n in self.feature_names()))
        if self.running_in_hypervisor:
            lines.append("Hypervisor is present; you're running in a VM.")
        return lines

    def print_characteristics(self, console: Optional[Console] = None) -> None:
        """Write the report to ``console``, or to the shared console."""
        target = console if console is not None else singleton()
        for line in self.characteristics_lines():
            target.println(line)


@dataclass(frozen=True)
class CacheInfo:
    """One cache as reported by the deterministic cache-parameters leaf."""

    level: int
    cache_type: int
    ways: int
    line_size: int
    sets: int

    @property
    def size_kb(self) -> int:
        return ((self.ways * self.line_size * self.sets) & 0xFFFFFFFF) >> 10


def decode_cache_info(registers: Sequence[int]) -> Optional[CacheInfo]:
    """Decode the four registers of one cache leaf; None marks the end of the list."""
    if len(registers) != 4:
        raise ValueError("cache information takes four registers")
    eax, ebx, ecx, _edx = (int(r) & 0xFFFFFFFF for r in registers)
    cache_type = eax & 31
    if not cache_type:
        return None
    return CacheInfo(
        level=(eax >> 5) & 7,
        cache_type=cache_type,
        ways=1 + (ebx >> 22),
        line_size=1 + (ebx & 2047),
        sets=(1 + ecx) & 0xFFFFFFFF,
    )


def describe_cache(index: int, info: CacheInfo) -> str:
    """Return the one-line description of cache number ``index``."""
    parts = [
        f"Cache {index}: ",
        _CACHE_LEVELS.get(info.level, ""),
        _CACHE_TYPES.get(info.cache_type, ""),
        f"line size {info.line_size}, ",
        f"{info.ways:2d}-way{'s' if info.ways > 1 else ''}, ",
        f"{info.sets:5d} sets, ",
        f"size {info.size_kb}k ",
    ]
    return "".join(parts)


def _run(command: List[str]) -> str:
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError:
        return ""
    return result.stdout


def _last_matching_value(text: str, pattern: str) -> str:
    """Value of the last line matching ``pattern``, text up to the last ': ' dropped."""
    matches = [line for line in text.splitlines() if re.search(pattern, line)]
    if not matches:
        return ""
    return re.sub(r"^.*: ", "", matches[-1], count=1) + "\n"


def cpu_string() -> str:
    """Return a one-line description of the processor and operating system."""
    system = platform.system()
    if system == "Windows":
        bits = "64" if sys.maxsize > 2**32 else "32"
        return f"Windows {bits}-bit (without Cygwin)"

    text = ""
    if system == "Linux" or system.startswith("CYGWIN"):
        try:
            cpuinfo = _BRAND_FILE.read_text(encoding="utf-8", errors="replace")
        except OSError:
            console = singleton()
            console.println("CPU information is not available (/proc/cpuinfo).")
            console.flush()
        else:
            text += _last_matching_value(cpuinfo, r"[Mm]odel.*:")
            text += _last_matching_value(cpuinfo, r"Hardware.*:")
        text += _run(["uname", "-o"])
    elif system == "Darwin":
        brand = _run(["sysctl", "machdep.cpu.brand_string"])
        text += "".join(re.sub(r"^.*: ", "", line, count=1) + "\n" for line in brand.splitlines())
        text += _run(["uname", "-s", "-r"])

    text = text[:_MAX_CPU_STRING]
    return text.replace("\n", " ").replace("\r", " ")
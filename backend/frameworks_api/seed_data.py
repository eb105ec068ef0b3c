"""Reference data written into an empty ``frameworks`` table.

Bump ``FRAMEWORK_SEED_VERSION`` whenever the rows below change so log lines
from a seeding run can be traced back to the dataset that produced them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

FRAMEWORK_SEED_VERSION = "1"


@dataclass(frozen=True)
class FrameworkSeed:
    name: str
    description: str
    version: str
    visible: bool = True

    def as_row(self) -> dict[str, object]:
        return asdict(self)


DEFAULT_FRAMEWORKS: tuple[FrameworkSeed, ...] = (
    FrameworkSeed(
        name="SOC 2 Type II",
        description="Service Organization Control 2 Type II certification",
        version="2017",
    ),
    FrameworkSeed(
        name="ISO 27001",
        description="Information security management systems",
        version="2022",
    ),
    FrameworkSeed(
        name="GDPR",
        description="General Data Protection Regulation",
        version="2016/679",
    ),
    FrameworkSeed(
        name="HIPAA",
        description="Health Insurance Portability and Accountability Act",
        version="1996",
    ),
    FrameworkSeed(
        name="PCI DSS",
        description="Payment Card Industry Data Security Standard",
        version="4.0",
    ),
)

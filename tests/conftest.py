"""
Pytest configuration and fixtures for sfdisksort tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


GPT_HEADER = """label: gpt
label-id: 5C9A3B4E-8D7F-4A21-9E33-0F1B2C3D4E5F
device: /dev/sdb
unit: sectors
first-lba: 2048
last-lba: 62914526
sector-size: 512
"""

UNSORTED_GPT_DUMP = (
    GPT_HEADER
    + """
/dev/sdb1 : start=        2048, size=      204800, type=C12A7328-F81F-11D2-BA4B-00A0C93EC93B, uuid=11111111-1111-1111-1111-111111111111, name="EFI System"
/dev/sdb2 : start=     1050624, size=    61863903, type=0FC63DAF-8483-4772-8E79-3D69D8477DE4, uuid=22222222-2222-2222-2222-222222222222
/dev/sdb3 : start=      206848, size=      843776, type=0657FD6D-A4AB-43C4-84E5-0933C84B4F4F, uuid=33333333-3333-3333-3333-333333333333
"""
)

SORTED_GPT_DUMP = (
    GPT_HEADER
    + """
/dev/sdb1 : start=        2048, size=      204800, type=C12A7328-F81F-11D2-BA4B-00A0C93EC93B, uuid=11111111-1111-1111-1111-111111111111, name="EFI System"
/dev/sdb2 : start=      206848, size=      843776, type=0657FD6D-A4AB-43C4-84E5-0933C84B4F4F, uuid=33333333-3333-3333-3333-333333333333
/dev/sdb3 : start=     1050624, size=    61863903, type=0FC63DAF-8483-4772-8E79-3D69D8477DE4, uuid=22222222-2222-2222-2222-222222222222
"""
)

UNSORTED_NVME_DUMP = """label: gpt
label-id: 12345678-F226-1234-5678-E55555555555
device: /dev/nvme0n1
unit: sectors
first-lba: 2048
last-lba: 60088286
sector-size: 512

/dev/nvme0n1p1 : start=        2048, size=     1048576, type=C12A7328-F81F-11D2-BA4B-00A0C93EC93B, uuid=AAAAAAAA-BBBB-CCCC-DDDD-000000000001
/dev/nvme0n1p2 : start=    10536960, size=    49551327, type=0FC63DAF-8483-4772-8E79-3D69D8477DE4, uuid=AAAAAAAA-BBBB-CCCC-DDDD-000000000002
/dev/nvme0n1p3 : start=     1050624, size=     9486336, type=0657FD6D-A4AB-43C4-84E5-0933C84B4F4F, uuid=AAAAAAAA-BBBB-CCCC-DDDD-000000000003
"""

DOS_DUMP = """label: dos
label-id: 0x1c2b3a49
device: /dev/vda
unit: sectors
sector-size: 512

/dev/vda1 : start=     4196352, size=     8388608, type=83
/dev/vda2 : start=        2048, size=     4194304, type=82, bootable
"""

HEADER_ONLY_DUMP = GPT_HEADER


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    """Configure logging once, before any CLI run binds it to a captured stream."""
    from sfdisksort.core.config import LoggingConfig
    from sfdisksort.core.logging import setup_logging

    setup_logging(LoggingConfig(console_enabled=False, file_enabled=False))


@pytest.fixture
def unsorted_gpt_dump() -> str:
    return UNSORTED_GPT_DUMP


@pytest.fixture
def sorted_gpt_dump() -> str:
    return SORTED_GPT_DUMP


@pytest.fixture
def unsorted_nvme_dump() -> str:
    return UNSORTED_NVME_DUMP


@pytest.fixture
def dos_dump() -> str:
    return DOS_DUMP


@pytest.fixture
def header_only_dump() -> str:
    return HEADER_ONLY_DUMP


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")

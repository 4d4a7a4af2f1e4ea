import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure project root on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from libs.core.settings import Settings
from libs.firebird.isql import IsqlClient


# Trimmed-down firebird.conf in the layout the server package ships
SAMPLE_CONF = """\
# Firebird configuration file
#
#DefaultDbCachePages = 2048
#
# Accept connections on all interfaces
# RemoteBindAddress = localhost
#
#AuthServer = Srp
#AuthClient = Srp, Win_Sspi, Legacy_Auth
#UserManager = Srp
#WireCrypt = Required
#RemoteServicePort = 3050
"""


@pytest.fixture()
def conf_path(tmp_path: Path) -> Path:
    path = tmp_path / "firebird.conf"
    path.write_text(SAMPLE_CONF, encoding="utf-8")
    return path


@pytest.fixture()
def settings(tmp_path: Path, conf_path: Path) -> Settings:
    password_file = tmp_path / "SYSDBA.password"
    password_file.write_text("ISC_USER=sysdba\nISC_PASSWORD=masterkey\n")
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return Settings(
        firebird_major=3,
        firebird_data=data_dir,
        firebird_config_file=conf_path,
        firebird_isql=tmp_path / "bin" / "isql",
        firebird_server=tmp_path / "bin" / "fb_smp_server",
        firebird_guardian=tmp_path / "bin" / "fbguard",
        firebird_security_db="security.db",
        firebird_sysdba_password_path=password_file,
    )


@pytest.fixture()
def isql() -> MagicMock:
    return MagicMock(spec=IsqlClient)

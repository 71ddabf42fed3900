"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings
from hierarchy.builder import build_hierarchy
from view.controller import ViewStateController


@pytest.fixture
def sample_records():
    """Small org: CEO with two reports, one nested report and one orphan."""
    return [
        {'EMPLOYEENUMBER': '1', 'FIRSTNAME': 'Ada'},
        {'EMPLOYEENUMBER': '2', 'SUPERVISORPARTYID': '1', 'FIRSTNAME': 'Alice'},
        {'EMPLOYEENUMBER': '3', 'SUPERVISORPARTYID': '1', 'FIRSTNAME': 'Bob'},
        {'EMPLOYEENUMBER': '4', 'SUPERVISORPARTYID': '2', 'FIRSTNAME': 'Carol'},
        {'EMPLOYEENUMBER': '5', 'SUPERVISORPARTYID': '99', 'FIRSTNAME': 'Orphan'},
    ]


@pytest.fixture
def root_child_orphan_records():
    """Root, child and orphan example."""
    return [
        {'EMPLOYEENUMBER': '1', 'FIRSTNAME': 'Root'},
        {'EMPLOYEENUMBER': '2', 'SUPERVISORPARTYID': '1', 'FIRSTNAME': 'Child'},
        {'EMPLOYEENUMBER': '3', 'SUPERVISORPARTYID': '99', 'FIRSTNAME': 'Orphan'},
    ]


@pytest.fixture
def sample_index(sample_records):
    """NodeIndex built from sample_records."""
    return build_hierarchy(sample_records)


@pytest.fixture
def test_settings():
    """Settings with defaults only (no env file)."""
    return Settings(_env_file=None)


@pytest.fixture
def controller(test_settings):
    """Empty view controller."""
    return ViewStateController(config=test_settings)


@pytest.fixture
def loaded_controller(controller, sample_index):
    """View controller with sample_index loaded."""
    controller.load(sample_index)
    return controller


@pytest.fixture
def sample_csv_text():
    """CSV content with mixed-case headers."""
    return (
        "EmployeeNumber,SupervisorPartyId,FirstName\n"
        "1,,Ada\n"
        "2,1,Alice\n"
        "\n"
        "3,1,Bob\n"
        "4,2,Carol\n"
        "5,99,Orphan\n"
    )


@pytest.fixture
def sample_csv_path(tmp_path, sample_csv_text):
    """Sample CSV written to a temporary file."""
    csv_path = tmp_path / "employees.csv"
    csv_path.write_text(sample_csv_text, encoding='utf-8')
    return str(csv_path)

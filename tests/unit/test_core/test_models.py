"""
Unit tests for core.models module.
"""
import pytest
from core.models import Employee, NodeExtent, PositionedNode, ViewTransform, BuildReport


class TestEmployee:
    """Tests for Employee dataclass."""

    def test_defaults(self):
        """Test default manager, name and children."""
        emp = Employee(id="7")

        assert emp.manager_id is None
        assert emp.name == "Unknown"
        assert emp.children == []
        assert emp.is_leaf

    def test_children_default_list_independent(self):
        """Test children default list is not shared."""
        a = Employee(id="a")
        b = Employee(id="b")

        a.children.append(Employee(id="c"))

        assert len(a.children) == 1
        assert len(b.children) == 0

    def test_equality_is_identity(self):
        """Test two employees with equal fields are not equal."""
        a = Employee(id="1", name="Same")
        b = Employee(id="1", name="Same")

        assert a != b
        assert a == a

    def test_to_dict(self):
        """Test flat dict conversion."""
        boss = Employee(id="1", name="Boss")
        boss.children.append(Employee(id="2", manager_id="1", name="Report"))

        data = boss.to_dict()

        assert data == {'id': '1', 'manager_id': None, 'name': 'Boss', 'direct_reports': 1}

    def test_to_dict_with_children(self):
        """Test nested dict conversion."""
        boss = Employee(id="1", name="Boss")
        boss.children.append(Employee(id="2", manager_id="1", name="Report"))

        data = boss.to_dict(include_children=True)

        assert data['children'][0]['id'] == '2'
        assert data['children'][0]['children'] == []


class TestNodeExtent:
    """Tests for NodeExtent dataclass."""

    def test_corners(self):
        """Test extent corners around the centre point."""
        extent = NodeExtent(x=100, y=50, width=40, height=20)

        assert extent.x1 == 80
        assert extent.x2 == 120
        assert extent.y1 == 40
        assert extent.y2 == 60

    def test_zero_size(self):
        """Test zero-size extent collapses to its point."""
        extent = NodeExtent(x=5, y=6)

        assert extent.x1 == extent.x2 == 5
        assert extent.y1 == extent.y2 == 6


class TestPositionedNode:
    """Tests for PositionedNode dataclass."""

    def test_to_extent(self):
        """Test geometry is carried over."""
        node = PositionedNode(id="1", name="A", depth=0, x=1, y=2, width=3, height=4)

        extent = node.to_extent()

        assert (extent.x, extent.y, extent.width, extent.height) == (1, 2, 3, 4)

    def test_to_dict(self):
        """Test dict conversion keeps identity fields."""
        node = PositionedNode(id="1", name="A", depth=2, x=0, y=0, width=10, height=10, manager_id="9")

        data = node.to_dict()

        assert data['id'] == "1"
        assert data['depth'] == 2
        assert data['manager_id'] == "9"


class TestViewTransform:
    """Tests for ViewTransform dataclass."""

    def test_identity_default(self):
        """Test default transform is identity."""
        t = ViewTransform()

        assert t.invert(3, 4) == (3, 4)

    def test_invert(self):
        """Test screen points map back to world coordinates."""
        t = ViewTransform(translate_x=10, translate_y=-5, scale=0.5)

        assert t.invert(60, 95) == pytest.approx((100, 200))

    def test_frozen(self):
        """Test transform is immutable."""
        t = ViewTransform()

        with pytest.raises(Exception):
            t.scale = 2.0


class TestBuildReport:
    """Tests for BuildReport dataclass."""

    def test_empty_report(self):
        """Test a fresh report has no warnings."""
        report = BuildReport()

        assert report.duplicate_count == 0
        assert not report.has_warnings

    def test_warnings(self):
        """Test unresolved managers count as warnings."""
        report = BuildReport(unresolved_managers={'3': '99'})

        assert report.has_warnings
        assert report.to_dict()['unresolved_managers'] == {'3': '99'}
        assert report.to_dict()['has_warnings'] is True

    def test_duplicate_count(self):
        """Test duplicate count follows duplicate ids."""
        report = BuildReport(duplicate_ids=['1', '1'])

        assert report.duplicate_count == 2
        assert not report.has_warnings

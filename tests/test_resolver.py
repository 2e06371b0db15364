"""Tests for recipe resolution into composition trees."""

from recipegraph import Catalog, DrugRecord, NodeRole, iter_tree, resolve
from tests.conftest import make_catalog


def labels(node):
    return [child.label for child in node.visible_children]


def depth_of(node) -> int:
    if not node.children:
        return 0
    return 1 + max(depth_of(child) for child in node.children)


class TestRoles:
    def test_root_with_record(self, abc_catalog):
        root = resolve(abc_catalog, "A")
        assert root.role == NodeRole.ROOT
        assert root.attributes is not None
        assert root.attributes.recipe_text == "B + C"

    def test_unknown_component_is_leaf(self):
        catalog = make_catalog({"Mix": "Water + Salt"})
        root = resolve(catalog, "Mix")
        for child in root.visible_children:
            assert child.role == NodeRole.LEAF
            assert child.attributes is None
            assert child.children == []

    def test_unknown_root_is_leaf(self, abc_catalog):
        root = resolve(abc_catalog, "Nothing")
        assert root.role == NodeRole.LEAF
        assert root.attributes is None

    def test_known_component_is_composite(self, abc_catalog):
        root = resolve(abc_catalog, "A")
        b = root.visible_children[0]
        assert b.role == NodeRole.COMPOSITE
        assert b.attributes.recipe_text == "C + A"

    def test_empty_recipe_is_composite_not_leaf(self, abc_catalog):
        root = resolve(abc_catalog, "A")
        c = root.visible_children[1]
        assert c.role == NodeRole.COMPOSITE
        assert c.attributes is not None
        assert c.children == []

    def test_empty_recipe_root(self, abc_catalog):
        root = resolve(abc_catalog, "C")
        assert root.role == NodeRole.ROOT
        assert root.children == []


class TestScenario:
    def test_abc_tree_shape(self, abc_catalog):
        root = resolve(abc_catalog, "A")
        assert root.label == "A"
        assert labels(root) == ["B", "C"]

        b, c = root.visible_children
        assert labels(b) == ["C", "A"]
        b_c, b_a = b.visible_children
        assert b_c.role == NodeRole.COMPOSITE
        assert b_a.role == NodeRole.CIRCULAR_REF
        assert b_a.attributes is None
        assert b_a.children == []

        assert c.role == NodeRole.COMPOSITE

    def test_all_children_start_visible(self, abc_catalog):
        root = resolve(abc_catalog, "A")
        for node in iter_tree(root):
            assert node.hidden_children == []


class TestCycles:
    def test_self_reference(self):
        catalog = make_catalog({"Ouroboros": "Ouroboros + Tail"})
        root = resolve(catalog, "Ouroboros")
        assert [c.role for c in root.visible_children] == [NodeRole.CIRCULAR_REF, NodeRole.LEAF]

    def test_case_insensitive_cycle(self):
        catalog = make_catalog({"Loop": "LOOP"})
        root = resolve(catalog, "loop")
        assert root.visible_children[0].role == NodeRole.CIRCULAR_REF
        assert root.visible_children[0].label == "LOOP"

    def test_siblings_do_not_share_path(self):
        # Both branches reach "Base" independently; neither is circular.
        catalog = make_catalog({"Top": "Left + Right", "Left": "Base", "Right": "Base", "Base": "salt"})
        root = resolve(catalog, "Top")
        left, right = root.visible_children
        assert left.visible_children[0].role == NodeRole.COMPOSITE
        assert right.visible_children[0].role == NodeRole.COMPOSITE
        assert left.visible_children[0] is not right.visible_children[0]

    def test_complete_cycle_terminates(self, complete_cycle_catalog):
        root = resolve(complete_cycle_catalog, "P")
        # Depth is bounded by the number of distinct labels on a path.
        assert depth_of(root) <= len(complete_cycle_catalog)
        for node in iter_tree(root):
            if node.role == NodeRole.CIRCULAR_REF:
                assert node.children == []

    def test_complete_cycle_every_path_ends_circular(self, complete_cycle_catalog):
        root = resolve(complete_cycle_catalog, "P")
        roles = {node.role for node in iter_tree(root) if not node.children}
        assert roles == {NodeRole.CIRCULAR_REF}


class TestLabels:
    def test_label_keeps_recipe_spelling(self):
        catalog = Catalog([DrugRecord("Mix", "water"), DrugRecord("Water", "")])
        child = resolve(catalog, "Mix").visible_children[0]
        assert child.label == "water"
        assert child.attributes.name == "Water"

    def test_root_label_keeps_caller_spelling(self, abc_catalog):
        root = resolve(abc_catalog, "a")
        assert root.label == "a"
        assert root.attributes.name == "A"

    def test_duplicate_components_in_order(self):
        catalog = make_catalog({"Double": "Water + Water"})
        assert labels(resolve(catalog, "Double")) == ["Water", "Water"]

    def test_catalog_not_mutated(self, abc_catalog):
        before = list(abc_catalog)
        resolve(abc_catalog, "A")
        assert list(abc_catalog) == before


class TestDeepChains:
    def test_long_linear_chain(self):
        length = 600
        catalog = make_catalog({f"D{i}": f"D{i + 1}" for i in range(length)})
        root = resolve(catalog, "D0")
        node, depth = root, 0
        while node.visible_children:
            node = node.visible_children[0]
            depth += 1
        assert depth == length
        assert node.label == f"D{length}"
        assert node.role == NodeRole.LEAF

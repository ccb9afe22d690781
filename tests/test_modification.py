import unittest

from justdom import comment, element, fragment, parse_fragment, text
from justdom.errors import HierarchyRequestError, TreeInconsistencyError
from justdom.iteration import depth_first
from justdom.modification import (
    append,
    clone_node,
    insert_before,
    insert_node,
    normalize,
    remove,
    replace,
)
from justdom.serialize import to_html


def _texts(node) -> list[str]:
    return [child.data if child.name == "#text" else child.name for child in node.children]


class TestInsertion(unittest.TestCase):
    def test_append_sets_parent(self) -> None:
        parent = element("div")
        child = element("span")
        append(parent, child)
        self.assertEqual(parent.children, [child])
        self.assertIs(child.parent, parent)

    def test_insert_before_reference(self) -> None:
        parent = element("ul")
        first, last = element("li"), element("li")
        append(parent, last)
        insert_before(parent, last, first)
        self.assertEqual(parent.children, [first, last])

    def test_insert_before_none_appends(self) -> None:
        parent = element("ul")
        first, last = element("li"), element("li")
        append(parent, first)
        insert_before(parent, None, last)
        self.assertEqual(parent.children, [first, last])

    def test_insert_before_foreign_reference_raises(self) -> None:
        parent = element("ul")
        stranger = element("li")
        append(element("ol"), stranger)
        with self.assertRaises(TreeInconsistencyError):
            insert_before(parent, stranger, element("li"))

    def test_insert_node_at_index(self) -> None:
        parent = element("p")
        a, b, c = text("a"), text("b"), text("c")
        append(parent, a)
        append(parent, c)
        self.assertIsNone(insert_node(parent, 1, b))
        self.assertEqual(_texts(parent), ["a", "b", "c"])

    def test_insert_node_rejects_bad_index(self) -> None:
        parent = element("p")
        with self.assertRaises(HierarchyRequestError):
            insert_node(parent, 1, text("x"))
        with self.assertRaises(HierarchyRequestError):
            insert_node(parent, -1, text("x"))

    def test_cannot_insert_into_leaf(self) -> None:
        with self.assertRaises(HierarchyRequestError):
            append(text("leaf"), element("b"))
        with self.assertRaises(HierarchyRequestError):
            append(comment("note"), element("b"))

    def test_cannot_insert_ancestor_into_descendant(self) -> None:
        outer = element("div")
        inner = element("div")
        append(outer, inner)
        with self.assertRaises(HierarchyRequestError):
            append(inner, outer)
        with self.assertRaises(HierarchyRequestError):
            append(outer, outer)
        self.assertEqual(outer.children, [inner])

    def test_moving_within_same_parent(self) -> None:
        parent = element("ul")
        items = [element("li") for _ in range(3)]
        for item in items:
            append(parent, item)
        insert_before(parent, items[0], items[2])
        self.assertEqual(parent.children, [items[2], items[0], items[1]])
        append(parent, items[2])
        self.assertEqual(parent.children, items)


class TestFragmentInsertion(unittest.TestCase):
    def test_fragment_children_are_spliced(self) -> None:
        parent = element("ul")
        first, last = element("li"), element("li")
        append(parent, first)
        append(parent, last)
        frag = fragment()
        moved = [element("li") for _ in range(3)]
        for node in moved:
            append(frag, node)

        before = len(parent.children)
        insert_before(parent, last, frag)
        self.assertEqual(len(parent.children), before + 3)
        self.assertEqual(parent.children, [first, *moved, last])
        self.assertEqual(frag.children, [])
        self.assertTrue(all(node.parent is parent for node in moved))
        self.assertIsNone(frag.parent)

    def test_empty_fragment_is_noop(self) -> None:
        parent = element("ul")
        append(parent, fragment())
        self.assertEqual(parent.children, [])

    def test_replace_with_fragment(self) -> None:
        parent = parse_fragment("<b>old</b>")
        old = parent.children[0]
        frag = parse_fragment("<i>1</i><i>2</i>")
        replace(old, frag)
        self.assertEqual(to_html(parent), "<i>1</i><i>2</i>")
        self.assertIsNone(old.parent)
        self.assertEqual(frag.children, [])


class TestSingleOwner(unittest.TestCase):
    def test_reinsert_moves_node(self) -> None:
        first, second = element("div"), element("div")
        child = element("span")
        append(first, child)
        append(second, child)
        self.assertEqual(first.children, [])
        self.assertEqual(second.children, [child])
        self.assertIs(child.parent, second)

    def test_remove_then_append(self) -> None:
        first, second = element("div"), element("div")
        child = element("span")
        append(first, child)
        remove(child)
        self.assertIsNone(child.parent)
        append(second, child)
        owners = [parent for parent in (first, second) if child in parent.children]
        self.assertEqual(owners, [second])


class TestReplaceAndRemove(unittest.TestCase):
    def test_replace_returns_old_node(self) -> None:
        parent = element("p")
        a, b, c = text("a"), text("b"), text("c")
        for node in (a, b, c):
            append(parent, node)
        new = element("em")
        self.assertIs(replace(b, new), b)
        self.assertEqual(parent.children, [a, new, c])
        self.assertIsNone(b.parent)
        self.assertIs(new.parent, parent)

    def test_replace_with_sibling(self) -> None:
        parent = element("p")
        a, b, c = text("a"), text("b"), text("c")
        for node in (a, b, c):
            append(parent, node)
        replace(c, a)
        self.assertEqual(parent.children, [b, a])
        self.assertIsNone(c.parent)

    def test_replace_with_itself_is_noop(self) -> None:
        parent = element("p")
        child = text("a")
        append(parent, child)
        replace(child, child)
        self.assertEqual(parent.children, [child])
        self.assertIs(child.parent, parent)

    def test_replace_detached_raises(self) -> None:
        with self.assertRaises(HierarchyRequestError):
            replace(element("p"), element("div"))

    def test_insert_node_replace_returns_removed(self) -> None:
        parent = element("p")
        old = text("old")
        append(parent, old)
        new = text("new")
        self.assertIs(insert_node(parent, 0, new, replace=True), old)
        self.assertEqual(parent.children, [new])

    def test_remove_parentless_is_noop(self) -> None:
        node = element("p")
        remove(node)
        self.assertIsNone(node.parent)

    def test_remove_inconsistent_raises(self) -> None:
        parent = element("div")
        child = element("span")
        child.parent = parent
        with self.assertRaises(TreeInconsistencyError):
            remove(child)


class TestClone(unittest.TestCase):
    def test_clone_is_equal_but_independent(self) -> None:
        root = parse_fragment('<div class="box"><p>one <b>two</b></p><!--note--></div>')
        div = root.children[0]
        copy = clone_node(div)

        self.assertIsNone(copy.parent)
        self.assertIs(div.parent, root)
        self.assertEqual(to_html(copy), to_html(div))
        originals = {id(node) for node in depth_first(div)}
        self.assertTrue(all(id(node) not in originals for node in depth_first(copy)))

        copy.attrs["class"] = "changed"
        append(copy.children[0], text("three"))
        self.assertEqual(div.attrs["class"], "box")
        self.assertEqual(to_html(div), '<div class="box"><p>one <b>two</b></p><!--note--></div>')

    def test_clone_keeps_internal_parent_links(self) -> None:
        root = parse_fragment("<ul><li>a</li></ul>")
        copy = clone_node(root.children[0])
        li = copy.children[0]
        self.assertIs(li.parent, copy)
        self.assertIs(li.children[0].parent, li)

    def test_clone_copies_template_content(self) -> None:
        root = parse_fragment("<template><td>x</td></template>")
        template = root.children[0]
        copy = clone_node(template)
        self.assertIsNot(copy.template_content, template.template_content)
        self.assertEqual(to_html(copy), to_html(template))


class TestNormalize(unittest.TestCase):
    def test_merges_adjacent_text(self) -> None:
        parent = element("p")
        for node in (text("a"), text("b"), element("br"), text("c")):
            append(parent, node)
        normalize(parent)
        self.assertEqual(_texts(parent), ["ab", "br", "c"])
        self.assertTrue(all(child.parent is parent for child in parent.children))

    def test_idempotent(self) -> None:
        parent = element("p")
        for node in (text("a"), text("b"), element("br"), text("c"), text("d")):
            append(parent, node)
        normalize(parent)
        once = _texts(parent)
        normalize(parent)
        self.assertEqual(_texts(parent), once)
        self.assertEqual(once, ["ab", "br", "cd"])

    def test_recurses_into_children(self) -> None:
        outer = element("div")
        inner = element("span")
        append(inner, text("x"))
        append(inner, text("y"))
        append(outer, inner)
        normalize(outer)
        self.assertEqual(_texts(inner), ["xy"])

    def test_drops_empty_text(self) -> None:
        parent = element("p")
        empty = text("")
        append(parent, empty)
        append(parent, element("br"))
        append(parent, text(""))
        append(parent, text(""))
        normalize(parent)
        self.assertEqual(_texts(parent), ["br"])
        self.assertIsNone(empty.parent)

    def test_merged_nodes_are_detached(self) -> None:
        parent = element("p")
        first, second = text("a"), text("b")
        append(parent, first)
        append(parent, second)
        normalize(parent)
        self.assertEqual(parent.children, [first])
        self.assertIsNone(second.parent)

    def test_leaves_are_untouched(self) -> None:
        leaf = text("x")
        normalize(leaf)
        self.assertEqual(leaf.data, "x")

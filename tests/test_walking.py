import unittest

from justdom import parse, parse_fragment, predicates
from justdom.iteration import child_nodes_include_template
from justdom.walking import (
    node_walk,
    node_walk_all,
    node_walk_all_prior,
    node_walk_ancestors,
    node_walk_prior,
    query,
    query_all,
    query_all_prior,
    query_prior,
)


def _div_scenario():
    root = parse_fragment("<div><span>x</span> y </div>")
    return root, root.children[0]


class TestScenario(unittest.TestCase):
    def test_query_all_span(self) -> None:
        _, div = _div_scenario()
        spans = query_all(div, predicates.has_tag_name("span"))
        self.assertEqual(len(spans), 1)
        self.assertEqual(spans[0].name, "span")
        self.assertIs(spans[0].parent, div)

    def test_query_direct_text_matches_containing_element(self) -> None:
        _, div = _div_scenario()
        self.assertIs(query(div, predicates.has_text_value(" y ")), div)
        self.assertIsNone(query(div, predicates.has_text_value("x y ")))

    def test_node_walk_can_return_text_nodes(self) -> None:
        _, div = _div_scenario()
        found = node_walk(div, predicates.is_text_node)
        self.assertEqual(found.data, "x")


class TestNodeWalk(unittest.TestCase):
    def setUp(self) -> None:
        self.root = parse("<ul><li id=a>1</li><li id=b>2<!--c--></li></ul><p id=c>3</p>")
        self.ul = query(self.root, predicates.has_tag_name("ul"))

    def test_node_walk_includes_start_node(self) -> None:
        self.assertIs(node_walk(self.ul, predicates.has_tag_name("ul")), self.ul)

    def test_node_walk_returns_none_when_missing(self) -> None:
        self.assertIsNone(node_walk(self.ul, predicates.has_tag_name("table")))

    def test_node_walk_all_in_document_order(self) -> None:
        ids = [node.attrs["id"] for node in node_walk_all(self.root, predicates.has_attr("id"))]
        self.assertEqual(ids, ["a", "b", "c"])

    def test_node_walk_all_accumulates(self) -> None:
        matches: list[object] = []
        result = node_walk_all(self.ul, predicates.has_tag_name("li"), matches)
        self.assertIs(result, matches)
        node_walk_all(self.root, predicates.has_tag_name("p"), matches)
        self.assertEqual([node.name for node in matches], ["li", "li", "p"])

    def test_node_walk_all_sees_comments(self) -> None:
        comments = node_walk_all(self.root, predicates.is_comment_node)
        self.assertEqual([node.data for node in comments], ["c"])

    def test_query_skips_non_elements(self) -> None:
        anything = predicates.NOT(predicates.is_element)
        self.assertIsNone(query(self.ul, anything))
        self.assertEqual(query_all(self.ul, anything), [])

    def test_query_all_accumulates(self) -> None:
        matches = query_all(self.ul, predicates.has_tag_name("li"))
        query_all(self.root, predicates.has_tag_name("p"), matches)
        self.assertEqual(len(matches), 3)

    def test_template_contents_need_the_template_accessor(self) -> None:
        root = parse("<template><b>hidden</b></template>")
        is_b = predicates.has_tag_name("b")
        self.assertIsNone(query(root, is_b))
        self.assertEqual(query(root, is_b, child_nodes_include_template).name, "b")
        self.assertEqual(len(query_all(root, is_b, get_child_nodes=child_nodes_include_template)), 1)


class TestPriorWalks(unittest.TestCase):
    def setUp(self) -> None:
        self.root = parse("<h1>one</h1><div><h2>two</h2><p>text</p></div><h1>three</h1>")
        self.p = query(self.root, predicates.has_tag_name("p"))
        self.heading = predicates.has_matching_tag_name(r"^h\d$")

    def test_node_walk_prior_finds_nearest_preceding(self) -> None:
        self.assertEqual(node_walk_prior(self.p, self.heading).name, "h2")

    def test_node_walk_prior_includes_node(self) -> None:
        self.assertIs(node_walk_prior(self.p, predicates.has_tag_name("p")), self.p)

    def test_node_walk_all_prior_in_reverse_document_order(self) -> None:
        found = node_walk_all_prior(self.p, self.heading)
        self.assertEqual([node.name for node in found], ["h2", "h1"])

    def test_node_walk_all_prior_never_looks_ahead(self) -> None:
        found = node_walk_all_prior(self.p, predicates.has_text_value("three"))
        self.assertEqual(found, [])

    def test_query_prior_only_returns_elements(self) -> None:
        found = query_all_prior(self.p, predicates.has_text_value("one"))
        self.assertEqual([node.name for node in found], ["h1"])
        self.assertEqual(query_prior(self.p, predicates.has_text_value("two")).name, "h2")
        self.assertEqual(node_walk_prior(self.p, predicates.has_text_value("two")).name, "#text")


class TestAncestorWalk(unittest.TestCase):
    def test_strict_ancestors_only(self) -> None:
        root = parse("<div class=outer><div class=inner><span>x</span></div></div>")
        span = query(root, predicates.has_tag_name("span"))
        inner = node_walk_ancestors(span, predicates.has_tag_name("div"))
        self.assertEqual(inner.attrs["class"], "inner")
        outer = node_walk_ancestors(inner, predicates.has_tag_name("div"))
        self.assertEqual(outer.attrs["class"], "outer")
        self.assertIsNone(node_walk_ancestors(root, predicates.is_document))

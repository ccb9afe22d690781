from . import predicates
from .constructors import comment, document, element, fragment, text
from .context import FragmentContext
from .errors import HierarchyRequestError, ParseError, StrictModeError, TreeError, TreeInconsistencyError
from .iteration import (
    ancestors,
    child_nodes_include_template,
    default_child_nodes,
    depth_first,
    depth_first_including_templates,
    depth_first_reversed,
    previous_siblings,
    prior,
    prior_including_node,
)
from .modification import append, clone_node, insert_before, insert_node, normalize, remove, replace
from .node import ElementNode, SimpleDomNode, TemplateNode, TextNode
from .parser import JustDOM, parse, parse_fragment
from .serialize import serialize, to_html
from .util import (
    get_attribute,
    get_direct_text,
    get_text_content,
    has_attribute,
    remove_attribute,
    set_attribute,
    set_text_content,
)
from .walking import (
    node_walk,
    node_walk_all,
    node_walk_all_prior,
    node_walk_ancestors,
    node_walk_prior,
    query,
    query_all,
    query_all_prior,
    query_prior,
    tree_map,
)

__all__ = [
    "ElementNode",
    "FragmentContext",
    "HierarchyRequestError",
    "JustDOM",
    "ParseError",
    "SimpleDomNode",
    "StrictModeError",
    "TemplateNode",
    "TextNode",
    "TreeError",
    "TreeInconsistencyError",
    "ancestors",
    "append",
    "child_nodes_include_template",
    "clone_node",
    "comment",
    "default_child_nodes",
    "depth_first",
    "depth_first_including_templates",
    "depth_first_reversed",
    "document",
    "element",
    "fragment",
    "get_attribute",
    "get_direct_text",
    "get_text_content",
    "has_attribute",
    "insert_before",
    "insert_node",
    "node_walk",
    "node_walk_all",
    "node_walk_all_prior",
    "node_walk_ancestors",
    "node_walk_prior",
    "normalize",
    "parse",
    "parse_fragment",
    "predicates",
    "previous_siblings",
    "prior",
    "prior_including_node",
    "query",
    "query_all",
    "query_all_prior",
    "query_prior",
    "remove",
    "remove_attribute",
    "replace",
    "serialize",
    "set_attribute",
    "set_text_content",
    "text",
    "to_html",
    "tree_map",
]

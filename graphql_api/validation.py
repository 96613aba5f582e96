from typing import Any, FrozenSet, Optional, Type

from graphql import GraphQLError, ValidationRule
from graphql.language.ast import (
    DocumentNode,
    FieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionSetNode,
)
from graphql.validation import ValidationContext


def create_max_depth_rule(max_depth: int) -> Type[ValidationRule]:
    """
    Reject operations nested deeper than `max_depth`.

    Root fields sit at depth 0 and every nested selection set adds one, so
    `{ users { posts { title } } }` has a depth of 2. Fragments are expanded
    in place and introspection fields (`__schema`, `__type`, ...) are not
    counted.
    """

    class MaxDepthRule(ValidationRule):
        def __init__(self, context: ValidationContext) -> None:
            super().__init__(context)
            self.max_depth: int = max_depth

        def enter_operation_definition(
            self, node: OperationDefinitionNode, *_args: Any
        ) -> None:
            depth = self.selection_depth(node.selection_set, 0, frozenset())
            if depth > self.max_depth:
                operation_name = node.name.value if node.name else ""
                self.report_error(
                    GraphQLError(
                        f"'{operation_name}' exceeds maximum operation depth of {self.max_depth}",
                        node,
                    )
                )

        def selection_depth(
            self,
            selection_set: Optional[SelectionSetNode],
            depth: int,
            visited_fragments: FrozenSet[str],
        ) -> int:
            deepest = depth
            if selection_set is None:
                return deepest

            for selection in selection_set.selections:
                if isinstance(selection, FieldNode):
                    if selection.name.value.startswith("__"):
                        continue
                    if selection.selection_set:
                        deepest = max(
                            deepest,
                            self.selection_depth(
                                selection.selection_set, depth + 1, visited_fragments
                            ),
                        )
                elif isinstance(selection, InlineFragmentNode):
                    deepest = max(
                        deepest,
                        self.selection_depth(
                            selection.selection_set, depth, visited_fragments
                        ),
                    )
                elif isinstance(selection, FragmentSpreadNode):
                    name = selection.name.value
                    # cycles are reported by the standard NoFragmentCycles rule
                    if name in visited_fragments:
                        continue
                    fragment = self.context.get_fragment(name)
                    if fragment:
                        deepest = max(
                            deepest,
                            self.selection_depth(
                                fragment.selection_set,
                                depth,
                                visited_fragments | {name},
                            ),
                        )
            return deepest

    return MaxDepthRule


def create_max_aliases_rule(max_aliases: int) -> Type[ValidationRule]:
    class MaxAliasesRule(ValidationRule):
        def __init__(self, context: ValidationContext) -> None:
            super().__init__(context)
            self.alias_count: int = 0
            self.has_reported_error: bool = False
            self.max_aliases: int = max_aliases

        def enter_document(self, node: DocumentNode, *_args: Any) -> None:
            self.alias_count = 0
            self.has_reported_error = False

        def enter_field(self, node: FieldNode, *_args: Any) -> None:
            if node.alias:
                self.alias_count += 1

                if self.alias_count > self.max_aliases and not self.has_reported_error:
                    self.has_reported_error = True
                    self.report_error(
                        GraphQLError(
                            "Query uses too many aliases",
                            node,
                        )
                    )

    return MaxAliasesRule

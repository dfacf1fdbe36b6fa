"""Action links rendered inside the "actions" column."""

import re
from typing import Sequence, Tuple

from datatable.data.rows import Row
from datatable.formatting.attributes import format_attributes
from datatable.rendering.markup import td
from datatable.validation.models import ActionSpec

# First "{field}" in an href template; braces cannot nest
PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


class ActionLinkBuilder:
    """Builds the anchor tags of an actions cell from ActionSpec templates."""

    def resolve_href(self, template: str, row: Row) -> str:
        """
        Substitute the first ``{field}`` placeholder of ``template``.

        Only the first placeholder is honoured; any later ones are emitted
        unchanged. A template without a placeholder is returned as-is.

        Args:
            template: href template, e.g. "/users/{id}/edit"
            row: Row supplying the field value

        Returns:
            Resolved href

        Raises:
            MissingFieldError: If the row does not have the placeholder field
        """
        match = PLACEHOLDER_PATTERN.search(template)
        if match is None:
            return template

        value = row.field(match.group(1))
        replacement = "" if value is None else str(value)
        return template[:match.start()] + replacement + template[match.end():]

    def action_button(self, href: str, label: str, attributes=None) -> str:
        """Anchor fragment for a single action."""
        return f'<a href="{href}" {format_attributes(attributes)}>{label}</a>\n'

    def render_buttons(self, row: Row, actions: Sequence[ActionSpec]) -> str:
        """Concatenated anchors for all actions, in order."""
        buttons = []
        for action in actions:
            href = self.resolve_href(action.href, row)
            buttons.append(self.action_button(href, action.label, action.attributes))
        return "".join(buttons)

    def render_actions_cell(self, row: Row, actions: Tuple[ActionSpec, ...]) -> str:
        """
        Render the whole actions cell for ``row``.

        Args:
            row: Row being rendered
            actions: Action specs, rendered in order

        Returns:
            A <td> containing one anchor per action (empty <td> if none)
        """
        buttons = self.render_buttons(row, actions)
        return td(buttons or None)

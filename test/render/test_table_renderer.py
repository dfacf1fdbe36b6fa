"""Tests for full table rendering."""

import re
import threading

import pytest

from datatable import render_table
from datatable.data import PageSlice, RowList
from datatable.exceptions import InvalidActionError, InvalidConfigurationError, MissingFieldError
from datatable.rendering import ColumnRenderer, TableRenderer, td
from datatable.validation import ActionSpec, TableOptions


class TestCompleteOutput:
    """Tests for the exact markup of a render call."""

    def test_single_row_table(self, renderer, edit_action):
        """Test the full fragment of a one-row unpaginated table."""
        dataset = RowList([{"id": 1, "name": "alice"}])

        html = renderer.render(dataset, ["row_num", "name", "actions"], [edit_action])

        assert html == (
            '<table class="table">\n'
            "<thead>\n"
            "<tr>\n"
            '<th class="small">#</th>\n'
            "<th>Name</th>\n"
            "<th>Actions</th>\n"
            "</tr>\n"
            "</thead>\n"
            "<tbody>\n"
            "<tr>\n"
            '<td class="small">1</td>\n'
            "<td>alice</td>\n"
            '<td><a href="/users/1/edit"  class="btn">Edit</a>\n</td>\n'
            "</tr>\n"
            "</tbody>\n"
            "<tfoot>\n"
            '<tr class="active">\n'
            '<td colspan="100%" class="text-center">1 - 1 / 1</td>\n'
            "</tr>\n"
            "</tfoot>\n"
            "</table>"
        )

    def test_paginated_table_appends_links(self, renderer, paginated_factory):
        """Test paginated output ends with the wrapped links markup."""
        dataset = paginated_factory(page=1, per_page=2, total=3, links="<ul>links</ul>")

        html = renderer.render(dataset, ["id"])

        assert html.endswith("</table>\n<div><ul>links</ul></div>")

    def test_unpaginated_table_has_no_links(self, renderer, unpaginated):
        """Test unpaginated output ends at the closing tag."""
        assert renderer.render(unpaginated, ["name"]).endswith("</table>")


class TestHead:
    """Tests for header generation."""

    def test_one_header_per_column_in_order(self, renderer, unpaginated):
        """Test the head holds exactly one <th> per column, in order."""
        columns = ["email", "name", "id", "row_num"]
        head = renderer.table_head(columns)
        headers = re.findall(r"<th[^>]*>(.*?)</th>", head)
        assert headers == ["Email", "Name", "Id", "#"]

    def test_empty_columns(self, renderer):
        """Test an empty column list renders an empty header row."""
        assert renderer.table_head([]) == "<thead>\n<tr>\n</tr>\n</thead>"


class TestBody:
    """Tests for body generation."""

    def test_rows_in_order(self, renderer, unpaginated):
        """Test one <tr> per record, in dataset order."""
        body = renderer.table_body(unpaginated, ["name"])
        assert re.findall(r"<td>(.*?)</td>", body) == ["alice", "bob", "carol"]
        assert body.count("<tr>") == 3

    def test_row_numbers_continue_across_pages(self, renderer, paginated_factory):
        """Test page 3 of size 10 numbers its rows from 21."""
        body = renderer.table_body(paginated_factory(page=3, per_page=10, total=25), ["row_num"])
        numbers = [int(n) for n in re.findall(r'<td class="small">(\d+)</td>', body)]
        assert numbers == [21, 22, 23, 24, 25]

    def test_row_numbers_strictly_increasing(self, renderer, paginated_factory):
        """Test the running index grows by one per row."""
        body = renderer.table_body(paginated_factory(page=2, per_page=7, total=30), ["row_num"])
        numbers = [int(n) for n in re.findall(r'<td class="small">(\d+)</td>', body)]
        assert numbers[0] == 8
        assert all(b - a == 1 for a, b in zip(numbers, numbers[1:]))

    def test_empty_dataset(self, renderer):
        """Test an empty dataset renders an empty body."""
        assert renderer.table_body(RowList([]), ["name"]) == "<tbody>\n</tbody>"

    def test_object_records(self, renderer):
        """Test records with attributes instead of keys."""

        class User:
            def __init__(self, id, name):
                self.id = id
                self.name = name

        body = renderer.table_body(RowList([User(9, "zed")]), ["id", "name"])
        assert "<td>9</td>\n<td>zed</td>\n" in body

    def test_actions_from_tuples(self, renderer, unpaginated):
        """Test positional action tuples are accepted."""
        body = renderer.table_body(unpaginated, ["actions"], [("Show", "/users/{id}")])
        assert '<a href="/users/3" >Show</a>' in body

    def test_empty_action_list(self, renderer, unpaginated):
        """Test the actions column without actions renders empty cells."""
        body = renderer.table_body(unpaginated, ["actions"], [])
        assert body.count("<td></td>") == 3
        assert "<a " not in body

    def test_column_formats(self, mock_logger):
        """Test configured number formats reach default cells."""
        renderer = TableRenderer(
            options=TableOptions(column_formats={"amount": "decimal:2"}), logger=mock_logger
        )
        body = renderer.table_body(RowList([{"amount": 1234.5}]), ["amount"])
        assert "<td>1,234.50</td>" in body

    def test_custom_renderer(self, mock_logger, unpaginated):
        """Test custom renderers receive the row and context."""
        renderer = TableRenderer(
            options=TableOptions(),
            logger=mock_logger,
            custom_renderers={
                "email": ColumnRenderer(
                    header=lambda: "<th>Contact</th>\n",
                    cell=lambda row, ctx: td(f'{ctx.row_index}:{row.field("email")}'),
                )
            },
        )
        html = renderer.render(unpaginated, ["email"])
        assert "<th>Contact</th>" in html
        assert "<td>2:bob@example.com</td>" in html


class TestFoot:
    """Tests for the footer summary row."""

    def test_unpaginated_footer(self, renderer, unpaginated):
        """Test three unpaginated rows read 1 - 3 / 3."""
        assert renderer.table_foot(unpaginated) == (
            "<tfoot>\n"
            '<tr class="active">\n'
            '<td colspan="100%" class="text-center">1 - 3 / 3</td>\n'
            "</tr>\n"
            "</tfoot>"
        )

    @pytest.mark.parametrize("page,expected", [(1, "1 - 10 / 25"), (2, "11 - 20 / 25"), (3, "21 - 25 / 25")])
    def test_paginated_footer(self, renderer, paginated_factory, page, expected):
        """Test footer ranges per page."""
        foot = renderer.table_foot(paginated_factory(page=page, per_page=10, total=25))
        assert f'class="text-center">{expected}</td>' in foot


class TestOpenCloseLinks:
    """Tests for the table tags and links wrapper."""

    def test_default_open(self, renderer):
        """Test the default table class."""
        assert renderer.open() == '<table class="table">'

    def test_open_with_attributes(self, renderer):
        """Test explicit attributes replace the defaults."""
        assert renderer.open({"id": "users", 0: "hidden"}) == '<table id="users" hidden>'

    def test_open_without_attributes(self, mock_logger):
        """Test options without table attributes."""
        renderer = TableRenderer(options=TableOptions(table_attributes=None), logger=mock_logger)
        assert renderer.open() == "<table>"

    def test_close(self, renderer):
        """Test the closing tag."""
        assert renderer.close() == "</table>"

    def test_links_class(self, mock_logger, paginated_factory):
        """Test the links wrapper class option."""
        renderer = TableRenderer(options=TableOptions(links_class="text-center"), logger=mock_logger)
        links = renderer.links(paginated_factory(page=1, per_page=5, total=8, links="<nav/>"))
        assert links == '<div class="text-center"><nav/></div>'

    def test_links_unpaginated(self, renderer, unpaginated):
        """Test no links for unpaginated data."""
        assert renderer.links(unpaginated) == ""


class TestErrors:
    """Tests for render failures."""

    def test_missing_dataset(self, renderer):
        """Test render without a dataset fails before output."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            renderer.render(None, ["name"])
        assert exc_info.value.code == "INVALID_CONFIGURATION"

    def test_not_a_dataset(self, renderer, users):
        """Test a bare list is not a dataset."""
        with pytest.raises(InvalidConfigurationError):
            renderer.render(users, ["name"])

    def test_missing_columns(self, renderer, unpaginated):
        """Test render without columns fails."""
        with pytest.raises(InvalidConfigurationError):
            renderer.render(unpaginated, None)

    def test_string_columns(self, renderer, unpaginated):
        """Test a single string is not a column list."""
        with pytest.raises(InvalidConfigurationError):
            renderer.render(unpaginated, "name")

    def test_non_string_column(self, renderer, unpaginated):
        """Test column names must be strings."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            renderer.render(unpaginated, ["name", 3])
        assert exc_info.value.details["invalid_columns"] == ["3"]

    def test_bad_actions_type(self, renderer, unpaginated):
        """Test actions must be a sequence."""
        with pytest.raises(InvalidConfigurationError):
            renderer.render(unpaginated, ["actions"], 5)

    def test_bad_action_entry(self, renderer, unpaginated):
        """Test malformed action entries are rejected."""
        with pytest.raises(InvalidActionError):
            renderer.render(unpaginated, ["actions"], [("Edit",)])

    def test_missing_column_field(self, renderer, unpaginated):
        """Test a column the rows lack fails the whole render."""
        with pytest.raises(MissingFieldError):
            renderer.render(unpaginated, ["name", "age"])

    def test_missing_placeholder_field(self, renderer, unpaginated):
        """Test an action placeholder the rows lack fails the render."""
        with pytest.raises(MissingFieldError) as exc_info:
            renderer.render(unpaginated, ["actions"], [("Edit", "/users/{uuid}")])
        assert exc_info.value.field == "uuid"

    @pytest.mark.parametrize("action", [("Edit", None), (5, "/u/{id}")])
    def test_non_string_action_parts(self, renderer, action):
        """Test actions with non-string label or href raise the project error."""
        with pytest.raises(InvalidActionError) as exc_info:
            renderer.render(RowList([{"id": 1}]), ["actions"], [action])
        assert exc_info.value.details["position"] == 0

    def test_dataset_missing_mode_methods(self, renderer):
        """Test an unpaginated dataset must provide count()."""

        class NoCount:
            def is_paginated(self):
                return False

            def rows(self):
                return []

        with pytest.raises(InvalidConfigurationError) as exc_info:
            renderer.render(NoCount(), ["id"])
        assert exc_info.value.details["missing"] == ["count"]

    def test_errors_not_logged(self, renderer, mock_logger, unpaginated):
        """Test failures propagate without being logged."""
        with pytest.raises(MissingFieldError):
            renderer.render(unpaginated, ["age"])
        mock_logger.error.assert_not_called()
        mock_logger.debug.assert_not_called()


class TestRowSources:
    """Tests for rows and datasets supplied by callers."""

    def test_underscore_field_on_object(self, renderer):
        """Test objects expose leading-underscore attributes as columns."""

        class Doc:
            def __init__(self):
                self._id = "abc"

        html = renderer.render(RowList([Doc()]), ["_id"])
        assert "<th>_id</th>" in html
        assert "<td>abc</td>" in html

    def test_paginated_dataset_without_count(self, renderer, mock_logger):
        """Test a paginated dataset only needs the paginated methods."""

        class Page:
            def is_paginated(self):
                return True

            def current_page(self):
                return 2

            def per_page(self):
                return 2

            def total(self):
                return 3

            def rows(self):
                return [{"id": 3}]

            def pagination_links_markup(self):
                return "<nav/>"

        html = renderer.render(Page(), ["row_num", "id"])
        assert '<td class="small">3</td>' in html
        assert "3 - 3 / 3" in html
        assert html.endswith("<div><nav/></div>")
        assert "1 rows" in mock_logger.debug.call_args.args[0]


class TestReuse:
    """Tests for repeated and shared use of one renderer."""

    def test_idempotent(self, renderer, paginated_factory, edit_action):
        """Test rendering twice yields identical output."""
        dataset = paginated_factory(page=2, per_page=10, total=25)
        columns = ["row_num", "name", "actions"]
        first = renderer.render(dataset, columns, [edit_action])
        second = renderer.render(dataset, columns, [edit_action])
        assert first == second

    def test_fresh_instances_match(self, unpaginated, edit_action):
        """Test the module-level helper matches an explicit renderer."""
        columns = ["row_num", "name", "actions"]
        expected = TableRenderer(options=TableOptions()).render(unpaginated, columns, [edit_action])
        assert render_table(unpaginated, columns, [edit_action], options=TableOptions()) == expected

    def test_calls_are_independent(self, renderer, paginated_factory):
        """Test one call's dataset does not leak into the next."""
        renderer.render(paginated_factory(page=3, per_page=10, total=25), ["row_num"])
        body = renderer.table_body(RowList([{"id": 1}]), ["row_num"])
        assert '<td class="small">1</td>' in body

    def test_concurrent_renders(self, renderer):
        """Test concurrent calls on one instance keep their own row numbers."""
        datasets = {
            page: PageSlice.from_rows([{"id": i} for i in range(200)], page=page, page_size=20)
            for page in range(1, 6)
        }
        results = {}

        def work(page):
            results[page] = renderer.table_body(datasets[page], ["row_num"])

        threads = [threading.Thread(target=work, args=(page,)) for page in datasets]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for page, body in results.items():
            numbers = [int(n) for n in re.findall(r'<td class="small">(\d+)</td>', body)]
            assert numbers == list(range((page - 1) * 20 + 1, page * 20 + 1))

    def test_logs_render(self, renderer, mock_logger, unpaginated):
        """Test a debug line is logged per render."""
        renderer.render(unpaginated, ["name"])
        mock_logger.debug.assert_called_once()
        assert "3 rows" in mock_logger.debug.call_args.args[0]

    def test_action_spec_instances(self, renderer, unpaginated):
        """Test ActionSpec instances and tuples render identically."""
        spec = [ActionSpec(label="Show", href="/users/{id}")]
        tuples = [("Show", "/users/{id}")]
        assert renderer.render(unpaginated, ["actions"], spec) == renderer.render(
            unpaginated, ["actions"], tuples
        )

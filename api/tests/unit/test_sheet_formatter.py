"""
Tests unitarios para el formato estructural de la pestana.
"""
from __future__ import annotations

import pytest

from order_sheets.application.services.sheet_formatter import SheetFormatter, build_format_requests
from order_sheets.shared.constants.sheet_constants import DATE_TIME_PATTERN, PICKUP_POINT_OPTIONS


def _range(request: dict) -> dict:
    body = next(iter(request.values()))
    return body["range"]


class TestBuildFormatRequests:
    def test_request_kinds_and_order(self) -> None:
        requests = build_format_requests(sheet_id=7, row_count=4, column_count=13)

        kinds = [next(iter(r)) for r in requests]
        assert kinds == [
            "repeatCell",
            "updateBorders",
            "setDataValidation",
            "setDataValidation",
            "setDataValidation",
            "repeatCell",
            "repeatCell",
        ]

    def test_header_is_bold_over_all_columns(self) -> None:
        header = build_format_requests(7, 4, 13)[0]["repeatCell"]

        assert header["range"] == {
            "sheetId": 7,
            "startRowIndex": 0,
            "endRowIndex": 1,
            "startColumnIndex": 0,
            "endColumnIndex": 13,
        }
        assert header["cell"]["userEnteredFormat"]["textFormat"]["bold"] is True
        assert header["fields"] == "userEnteredFormat.textFormat.bold"

    def test_borders_cover_the_whole_rectangle(self) -> None:
        borders = build_format_requests(7, 4, 15)[1]["updateBorders"]

        assert borders["range"]["endRowIndex"] == 4
        assert borders["range"]["endColumnIndex"] == 15
        for side in ("top", "bottom", "left", "right", "innerHorizontal", "innerVertical"):
            assert borders[side]["style"] == "SOLID"
            assert borders[side]["width"] == 1

    def test_pickup_dropdown_is_strict_on_column_five(self) -> None:
        rule_request = build_format_requests(7, 4, 13)[2]["setDataValidation"]

        assert rule_request["range"]["startRowIndex"] == 1
        assert rule_request["range"]["endRowIndex"] == 4
        assert rule_request["range"]["startColumnIndex"] == 5
        assert rule_request["range"]["endColumnIndex"] == 6
        condition = rule_request["rule"]["condition"]
        assert condition["type"] == "ONE_OF_LIST"
        assert [v["userEnteredValue"] for v in condition["values"]] == PICKUP_POINT_OPTIONS
        assert rule_request["rule"]["strict"] is True
        assert rule_request["rule"]["showCustomUi"] is True

    @pytest.mark.parametrize("position,column", [(3, 8), (4, 10)])
    def test_date_validation_is_lenient(self, position: int, column: int) -> None:
        rule_request = build_format_requests(7, 4, 13)[position]["setDataValidation"]

        assert rule_request["range"]["startColumnIndex"] == column
        assert rule_request["rule"]["condition"]["type"] == "DATE_IS_VALID"
        assert rule_request["rule"]["strict"] is False

    @pytest.mark.parametrize("position,column", [(5, 8), (6, 10)])
    def test_date_time_number_format(self, position: int, column: int) -> None:
        fmt = build_format_requests(7, 4, 13)[position]["repeatCell"]

        assert fmt["range"]["startColumnIndex"] == column
        assert fmt["range"]["endColumnIndex"] == column + 1
        assert fmt["cell"]["userEnteredFormat"]["numberFormat"] == {
            "type": "DATE_TIME",
            "pattern": DATE_TIME_PATTERN,
        }
        assert fmt["fields"] == "userEnteredFormat.numberFormat"

    def test_header_only_grid_skips_data_row_rules(self) -> None:
        requests = build_format_requests(7, 1, 13)

        assert [next(iter(r)) for r in requests] == ["repeatCell", "updateBorders"]

    def test_all_ranges_target_the_given_sheet(self) -> None:
        for request in build_format_requests(42, 3, 14):
            assert _range(request)["sheetId"] == 42

    def test_same_dimensions_produce_identical_requests(self) -> None:
        assert build_format_requests(7, 5, 13) == build_format_requests(7, 5, 13)


class TestSheetFormatter:
    @pytest.mark.asyncio
    async def test_sends_a_single_batch(self, fake_gateway) -> None:
        formatter = SheetFormatter(fake_gateway)

        await formatter.format(sheet_id=3, row_count=2, column_count=13)

        assert fake_gateway.calls == ["batch_update"]
        assert fake_gateway.batch_requests[0] == build_format_requests(3, 2, 13)

    @pytest.mark.asyncio
    async def test_formatting_twice_sends_the_same_requests(self, fake_gateway) -> None:
        formatter = SheetFormatter(fake_gateway)

        await formatter.format(3, 2, 13)
        await formatter.format(3, 2, 13)

        assert fake_gateway.batch_requests[0] == fake_gateway.batch_requests[1]

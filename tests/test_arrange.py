import unittest
from itertools import combinations

from label_layout.arrange import arrange_sheets, expand_units, is_oversized
from label_types import PlacedLabel, SheetConfig
from tests.helpers import make_spec


def _positions(labels: tuple[PlacedLabel, ...]) -> list[tuple[float, float]]:
    return [(label.x, label.y) for label in labels]


def _rows(labels: tuple[PlacedLabel, ...]) -> list[list[PlacedLabel]]:
    """Split a sheet's labels into rows; a row restarts when x moves back left."""

    rows: list[list[PlacedLabel]] = []
    for label in labels:
        if not rows or label.x <= rows[-1][-1].x:
            rows.append([])
        rows[-1].append(label)
    return rows


class ExpandUnitsTests(unittest.TestCase):
    def test_quantity_expansion_preserves_order(self) -> None:
        a = make_spec(quantity=3, name="a")
        b = make_spec(quantity=2, name="b")
        units = expand_units([a, b])
        self.assertEqual([u.spec.name for u in units], ["a", "a", "a", "b", "b"])
        self.assertEqual([u.index for u in units], [0, 1, 2, 0, 1])
        self.assertIs(units[0].spec, a)

    def test_non_positive_quantity_counts_once(self) -> None:
        units = expand_units([make_spec(quantity=0), make_spec(quantity=-4)])
        self.assertEqual(len(units), 2)


class ArrangeSheetsTests(unittest.TestCase):
    def test_single_row(self) -> None:
        specs = [make_spec(50, 20, name=n) for n in ("a", "b", "c")]
        sheets = arrange_sheets(specs, SheetConfig(600, 300, 0, 0))
        self.assertEqual(len(sheets), 1)
        self.assertEqual(sheets[0].page_number, 1)
        self.assertEqual(
            _positions(sheets[0].labels),
            [(0, 280), (50, 280), (100, 280)],
        )

    def test_exactly_full_row_wraps_next_label(self) -> None:
        sheets = arrange_sheets([make_spec(50, 20, quantity=13)], SheetConfig())
        labels = sheets[0].labels
        self.assertEqual(labels[11].x, 550)
        self.assertEqual(labels[11].y, 280)
        self.assertEqual((labels[12].x, labels[12].y), (0, 260))

    def test_full_sheet_opens_next_page(self) -> None:
        # 12 per row, 15 rows
        sheets = arrange_sheets([make_spec(50, 20, quantity=181)], SheetConfig())
        self.assertEqual([len(s.labels) for s in sheets], [180, 1])
        self.assertEqual([s.page_number for s in sheets], [1, 2])
        self.assertEqual((sheets[0].labels[-1].x, sheets[0].labels[-1].y), (550, 0))
        self.assertEqual((sheets[1].labels[0].x, sheets[1].labels[0].y), (0, 280))

    def test_two_specs_split_across_sheets(self) -> None:
        first = make_spec(100, 100, quantity=10, name="first")
        second = make_spec(100, 100, quantity=10, name="second")
        sheets = arrange_sheets([first, second], SheetConfig())
        self.assertEqual(len(sheets), 2)
        self.assertEqual(sheets[1].page_number, 2)
        self.assertEqual([len(s.labels) for s in sheets], [18, 2])
        self.assertEqual([l.spec.name for l in sheets[1].labels], ["second", "second"])

    def test_margin_and_gap(self) -> None:
        config = SheetConfig(200, 100, margin=5, gap=2)
        sheets = arrange_sheets([make_spec(40, 20, quantity=20)], config)
        self.assertEqual([len(s.labels) for s in sheets], [16, 4])
        first_row = sheets[0].labels[:4]
        self.assertEqual([l.x for l in first_row], [5, 47, 89, 131])
        self.assertEqual({l.y for l in first_row}, {75})
        self.assertEqual(sheets[0].labels[4].y, 53)
        self.assertEqual(sheets[0].labels[-1].y, 9)

    def test_row_height_follows_tallest_label(self) -> None:
        specs = [make_spec(300, 10), make_spec(300, 40), make_spec(100, 10)]
        sheets = arrange_sheets(specs, SheetConfig())
        labels = sheets[0].labels
        self.assertEqual(_positions(labels), [(0, 290), (300, 260), (0, 250)])

    def test_no_overlap_and_containment(self) -> None:
        sizes = [(50, 20), (80, 35), (120, 15), (33.3, 47.5), (200, 60), (10, 10)]
        specs = [make_spec(w, h, quantity=7) for w, h in sizes]
        config = SheetConfig(400, 250, margin=3, gap=1.5)
        sheets = arrange_sheets(specs, config)

        self.assertEqual(sum(len(s.labels) for s in sheets), 7 * len(sizes))
        for sheet in sheets:
            for first, second in combinations(sheet.labels, 2):
                self.assertFalse(first.overlaps(second), (first, second))
            for label in sheet.labels:
                self.assertGreaterEqual(label.x, config.margin - 1e-9)
                self.assertGreaterEqual(label.y, config.margin - 1e-9)
                self.assertLessEqual(label.right, config.width - config.margin + 1e-9)
                self.assertLessEqual(label.top, config.height - config.margin + 1e-9)

    def test_neighbours_keep_gap(self) -> None:
        sizes = [(50, 20), (80, 35), (120, 15), (33.3, 47.5), (200, 60), (10, 10)]
        specs = [make_spec(w, h, quantity=7) for w, h in sizes]
        config = SheetConfig(400, 250, margin=3, gap=1.5)
        sheets = arrange_sheets(specs, config)

        row_count = 0
        for sheet in sheets:
            rows = _rows(sheet.labels)
            row_count += len(rows)
            for row in rows:
                for left, right in zip(row, row[1:]):
                    self.assertGreaterEqual(right.x, left.right + config.gap - 1e-9)
            for upper, lower in zip(rows, rows[1:]):
                lowest_bottom = min(label.y for label in upper)
                for label in lower:
                    self.assertLessEqual(label.top, lowest_bottom - config.gap + 1e-9)
        self.assertGreater(row_count, len(sheets))

    def test_oversized_label_is_placed_with_warning(self) -> None:
        wide = make_spec(700, 20, name="wide")
        with self.assertLogs("label_layout.arrange", level="WARNING") as logs:
            sheets = arrange_sheets([wide, make_spec(50, 20)], SheetConfig())
        self.assertEqual(len(sheets), 1)
        self.assertEqual(_positions(sheets[0].labels), [(0, 260), (0, 240)])
        self.assertEqual(len(logs.records), 1)
        self.assertIn("wide", logs.output[0])

    def test_too_wide_label_wraps_even_on_empty_row(self) -> None:
        with self.assertLogs("label_layout.arrange", level="WARNING"):
            sheets = arrange_sheets([make_spec(700, 20)], SheetConfig())
        self.assertEqual(_positions(sheets[0].labels), [(0, 260)])

    def test_oversized_height_starts_new_sheet(self) -> None:
        specs = [make_spec(50, 20), make_spec(50, 400), make_spec(50, 20)]
        with self.assertLogs("label_layout.arrange", level="WARNING"):
            sheets = arrange_sheets(specs, SheetConfig())
        self.assertEqual([len(s.labels) for s in sheets], [1, 2])
        self.assertEqual(_positions(sheets[1].labels), [(0, -100), (50, 280)])

    def test_is_oversized(self) -> None:
        config = SheetConfig(600, 300, margin=10)
        self.assertFalse(is_oversized(make_spec(580, 280), config))
        self.assertTrue(is_oversized(make_spec(581, 20), config))
        self.assertTrue(is_oversized(make_spec(20, 281), config))

    def test_empty_input(self) -> None:
        self.assertEqual(arrange_sheets([], SheetConfig()), [])

    def test_deterministic(self) -> None:
        specs = [make_spec(37, 13, quantity=40), make_spec(90, 45, quantity=9)]
        self.assertEqual(
            arrange_sheets(specs, SheetConfig()),
            arrange_sheets(specs, SheetConfig()),
        )


class SheetConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = SheetConfig()
        self.assertEqual((config.width, config.height), (600, 300))
        self.assertEqual((config.margin, config.gap), (0, 0))

    def test_rejects_invalid_geometry(self) -> None:
        with self.assertRaises(ValueError):
            SheetConfig(width=0)
        with self.assertRaises(ValueError):
            SheetConfig(height=-1)
        with self.assertRaises(ValueError):
            SheetConfig(margin=-1)
        with self.assertRaises(ValueError):
            SheetConfig(gap=-0.5)
        with self.assertRaises(ValueError):
            SheetConfig(width=100, height=100, margin=50)

    def test_rejects_non_finite_geometry(self) -> None:
        for field_name in ("width", "height", "margin", "gap"):
            for value in (float("nan"), float("inf")):
                with self.subTest(field=field_name, value=value):
                    with self.assertRaises(ValueError):
                        SheetConfig(**{field_name: value})


if __name__ == "__main__":
    unittest.main()

"""Tests for report composition."""

import os
import unittest
from datetime import date, datetime, timezone

from visitreport.services.reports.models import (
    NoteRecord,
    PhotoRecord,
    VisitBundle,
    VisitRecord,
)
from visitreport.services.reports.rendering.composer import (
    ReportComposer,
    compose_report,
    format_long_date,
    group_notes_by_category,
)
from visitreport.services.reports.rendering.options import ComposeConfig
from visitreport.services.reports.rendering.renderer import render_markup

STAMP = datetime(2025, 3, 15, 9, 30)
CREATED = datetime(2025, 3, 14, 15, 0, tzinfo=timezone.utc)

EXPECTED_FIXTURE_REPORT = """# College Visit Report: Example State University

**Visit Date:** March 14, 2025

**Location:** Springfield, IL

---

## Executive Summary

This report documents my visit to Example State University. During this visit, I took 2 photos and recorded 3 detailed notes across 2 different categories.

## Detailed Observations

### Academic Programs & Quality

Small seminar classes, even in first year.

Strong computer science department.

### Housing & Accommodation

Dorms were renovated last summer.

## Visual Documentation

I captured 2 photos during my visit, documenting various aspects of the campus including:

- Main quad

## Key Takeaways

Based on my observations and notes, here are the main points to consider:

- Academic programs and educational opportunities were evaluated
- Housing options and living arrangements were reviewed

## Next Steps

- Review this report alongside other college visit reports
- Compare academic programs, campus culture, and overall fit
- Consider revisiting if needed for deeper exploration
- Discuss findings with family, counselors, and mentors
- Make informed decisions about college applications

---

*Report generated on March 15, 2025*
"""


def make_visit(**overrides) -> VisitRecord:
    data = {
        "id": "visit-1",
        "user_id": "local",
        "college_name": "Example State University",
        "visit_date": date(2025, 3, 14),
        "location": "",
        "created_at": CREATED,
        "updated_at": CREATED,
    }
    data.update(overrides)
    return VisitRecord(**data)


def make_note(note_id: str, category: str, content: str) -> NoteRecord:
    return NoteRecord(
        id=note_id,
        visit_id="visit-1",
        category=category,
        content=content,
        created_at=CREATED,
        updated_at=CREATED,
    )


def make_photo(photo_id: str, caption: str = "") -> PhotoRecord:
    return PhotoRecord(
        id=photo_id,
        visit_id="visit-1",
        photo_url=f"https://storage.example.com/{photo_id}.jpg",
        caption=caption,
        created_at=CREATED,
    )


def load_fixture_bundle() -> VisitBundle:
    path = os.path.join(os.path.dirname(__file__), "fixtures", "visit_bundle.json")
    with open(path, "r", encoding="utf-8") as f:
        return VisitBundle.model_validate_json(f.read())


class GroupNotesTest(unittest.TestCase):
    def test_first_seen_category_order_and_stable_members(self):
        a = make_note("a", "campus", "A")
        b = make_note("b", "social", "B")
        c = make_note("c", "campus", "C")

        groups = group_notes_by_category([a, b, c])

        self.assertEqual(list(groups), ["campus", "social"])
        self.assertEqual([n.id for n in groups["campus"]], ["a", "c"])
        self.assertEqual([n.id for n in groups["social"]], ["b"])

    def test_empty(self):
        self.assertEqual(group_notes_by_category([]), {})


class ComposeReportTest(unittest.TestCase):
    def test_fixture_report_text(self):
        bundle = load_fixture_bundle()
        text = compose_report(
            bundle.visit, bundle.notes, bundle.photos, generated_at=STAMP
        )
        self.assertEqual(text, EXPECTED_FIXTURE_REPORT)

    def test_empty_visit_is_minimal_but_valid(self):
        text = compose_report(make_visit(), [], [], generated_at=STAMP)

        self.assertIn("# College Visit Report: Example State University", text)
        self.assertNotIn("## Detailed Observations", text)
        self.assertNotIn("## Visual Documentation", text)
        self.assertNotIn("**Location:**", text)

        takeaways = text.split("## Key Takeaways\n\n", 1)[1].split("\n\n", 1)[0]
        self.assertEqual(takeaways, ComposeConfig().no_notes_fallback)
        self.assertIn(
            "I took 0 photos and recorded 0 detailed notes across 0 different categories.",
            text,
        )

    def test_singular_forms(self):
        text = compose_report(
            make_visit(),
            [make_note("n", "housing", "Nice rooms")],
            [make_photo("p", "Library")],
            generated_at=STAMP,
        )
        self.assertIn("I took 1 photo and recorded 1 detailed note across 1 category.", text)
        self.assertIn("I captured 1 photo during my visit", text)

    def test_note_count_reads_detailed_note(self):
        text = compose_report(
            make_visit(), [make_note("n", "general", "x")], [], generated_at=STAMP
        )
        self.assertIn("recorded 1 detailed note across", text)
        self.assertNotIn("1 note", text)

    def test_plural_forms(self):
        notes = [make_note("n1", "housing", "x"), make_note("n2", "housing", "y")]
        photos = [make_photo("p1"), make_photo("p2"), make_photo("p3")]
        text = compose_report(make_visit(), notes, photos, generated_at=STAMP)
        self.assertIn("I took 3 photos and recorded 2 detailed notes", text)

    def test_grouping_order_in_document(self):
        notes = [
            make_note("a", "social", "Note A"),
            make_note("b", "academics", "Note B"),
            make_note("c", "social", "Note C"),
        ]
        text = compose_report(make_visit(), notes, [], generated_at=STAMP)

        social = text.index("### Social Environment")
        academics = text.index("### Academic Programs & Quality")
        self.assertLess(social, academics)
        self.assertLess(text.index("Note A"), text.index("Note C"))
        self.assertLess(text.index("Note C"), academics)
        self.assertLess(
            text.index("- Social environment and community aspects were evaluated"),
            text.index("- Academic programs and educational opportunities were evaluated"),
        )

    def test_unmapped_category_falls_back_to_raw_tag(self):
        text = compose_report(
            make_visit(), [make_note("n", "athletics", "Big stadium")], [], generated_at=STAMP
        )
        self.assertIn("### athletics", text)
        self.assertIn("- Observations about athletics were recorded", text)

    def test_general_category_has_takeaway(self):
        text = compose_report(
            make_visit(), [make_note("n", "general", "Liked it")], [], generated_at=STAMP
        )
        self.assertIn("### General Observations", text)
        self.assertIn("- General impressions of the visit were recorded", text)

    def test_captionless_photos_contribute_no_bullets(self):
        photos = [make_photo("p1", "Gym"), make_photo("p2", ""), make_photo("p3", "   ")]
        text = compose_report(make_visit(), [], photos, generated_at=STAMP)

        section = text.split("## Visual Documentation\n\n", 1)[1].split("## ", 1)[0]
        bullets = [line for line in section.splitlines() if line.startswith("- ")]
        self.assertEqual(bullets, ["- Gym"])

    def test_photos_without_any_caption(self):
        text = compose_report(make_visit(), [], [make_photo("p1")], generated_at=STAMP)
        self.assertIn("## Visual Documentation\n\nI captured 1 photo during my visit.\n", text)

    def test_multiline_note_stays_on_one_line(self):
        note = make_note("n", "campus", "First line\n\n  second line\r\nthird")
        text = compose_report(make_visit(), [note], [], generated_at=STAMP)
        self.assertIn("\nFirst line second line third\n", text)

    def test_location_line(self):
        text = compose_report(make_visit(location="Boston, MA"), [], [], generated_at=STAMP)
        self.assertIn("**Location:** Boston, MA", text)

    def test_footer_uses_generation_time(self):
        text = compose_report(
            make_visit(), [], [], generated_at=datetime(2026, 10, 19, 12, 0)
        )
        self.assertTrue(text.endswith("---\n\n*Report generated on October 19, 2026*\n"))
        self.assertIn("**Visit Date:** March 14, 2025", text)

    def test_deterministic_for_identical_input(self):
        bundle = load_fixture_bundle()
        composer = ReportComposer()
        first = composer.compose(bundle.visit, bundle.notes, bundle.photos, generated_at=STAMP)
        second = composer.compose(bundle.visit, bundle.notes, bundle.photos, generated_at=STAMP)
        self.assertEqual(first, second)

    def test_custom_title_prefix(self):
        composer = ReportComposer(ComposeConfig(title_prefix="Campus Tour"))
        text = composer.compose(make_visit(), [], [], generated_at=STAMP)
        self.assertTrue(text.startswith("# Campus Tour: Example State University\n"))

    def test_every_line_renders_to_one_element(self):
        bundle = load_fixture_bundle()
        text = compose_report(bundle.visit, bundle.notes, bundle.photos, generated_at=STAMP)
        self.assertEqual(len(render_markup(text)), len(text.split("\n")))


class FormatLongDateTest(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_long_date(date(2025, 1, 5)), "January 5, 2025")


if __name__ == "__main__":
    unittest.main()

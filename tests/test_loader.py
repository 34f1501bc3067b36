import json
import os
import tempfile
import unittest

from grading.data import CurriculumLoader
from grading.exceptions import ConfigurationError
from grading.models import Course, CourseKind, GradeSystem, Semester, Curriculum
from tests.fakes import course_named


class DefaultCurriculumTests(unittest.TestCase):
    def setUp(self):
        self.curriculum = CurriculumLoader().load()

    def test_two_semesters_in_order(self):
        names = [[c.name for c in s.courses] for s in self.curriculum.semesters]
        self.assertEqual(names, [
            ["Math1", "Physics1", "English1", "Statistics", "Arabic", "Computer"],
            ["Math2", "Physics2", "Chemistry", "Drawing", "English2"],
        ])
        self.assertEqual(sum(c.units for c in self.curriculum.semesters[0].courses), 57)
        self.assertEqual(sum(c.units for c in self.curriculum.semesters[1].courses), 48)

    def test_semester_one_courses_are_split(self):
        self.assertTrue(all(c.kind == CourseKind.SPLIT for c in self.curriculum.semesters[0].courses))
        self.assertTrue(all(c.kind == CourseKind.SINGLE for c in self.curriculum.semesters[1].courses))

    def test_sources(self):
        math1 = course_named(self.curriculum, "Math1")
        self.assertEqual(self.curriculum.source_for(math1, GradeSystem.LEGACY), "https://pastebin.com/raw/4WscJMh0")
        self.assertEqual(self.curriculum.source_for(math1, GradeSystem.CURRENT), "https://pastebin.com/raw/1NcsJK7g")
        self.assertEqual(len(self.curriculum.sources), 17)

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            self.curriculum.grade_scale["AA"] = 5

    def test_loader_caches(self):
        loader = CurriculumLoader()
        self.assertIs(loader.load(), loader.load())


class CurriculumValidationTests(unittest.TestCase):
    def test_units_must_be_positive_integers(self):
        for units in (0, -3, 1.5, True):
            with self.assertRaises(ConfigurationError):
                Course("Math1", units)

    def test_duplicate_course_in_semester(self):
        with self.assertRaises(ConfigurationError):
            Semester(1, "Semester 1", (Course("Math1", 12), Course("Math1", 9)))

    def test_missing_source_is_rejected(self):
        semester = Semester(1, "Semester 1", (Course("Math1", 12, CourseKind.SPLIT),))
        with self.assertRaises(ConfigurationError):
            Curriculum((semester,), {"AA": 4}, {("Math1", GradeSystem.CURRENT): "mem://new"})

    def test_grading_scale_values_must_be_numbers(self):
        for scale in ({"AA": None}, {"AA": "x"}, {"AA": True}, {4: 4}):
            with self.assertRaises(ConfigurationError):
                Curriculum((), scale, {})

    def test_grading_scale_must_be_a_mapping(self):
        with self.assertRaises(ConfigurationError):
            Curriculum((), None, {})


class CurriculumFileTests(unittest.TestCase):
    def write_json(self, data):
        handle = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8")
        with handle:
            json.dump(data, handle)
        self.addCleanup(os.remove, handle.name)
        return handle.name

    def test_load_file(self):
        path = self.write_json({
            "grade_scale": {"A": 4, "B": 3},
            "semesters": [{
                "number": 1,
                "title": "Fall",
                "courses": [
                    {"name": "Algebra", "units": 6, "kind": "split",
                     "sources": {"current": "mem://alg/new", "legacy": "mem://alg/old"}},
                    {"name": "Art", "units": 3, "sources": {"single": "mem://art"}},
                ],
            }],
        })
        curriculum = CurriculumLoader().load(path)

        self.assertEqual(curriculum.semesters[0].title, "Fall")
        self.assertEqual(dict(curriculum.grade_scale), {"A": 4, "B": 3})
        art = course_named(curriculum, "Art")
        self.assertEqual(art.kind, CourseKind.SINGLE)
        self.assertEqual(curriculum.source_for(art, GradeSystem.SINGLE), "mem://art")

    def test_missing_file(self):
        with self.assertRaises(ConfigurationError):
            CurriculumLoader().load("/nonexistent/curriculum.json")

    def test_malformed_data(self):
        with self.assertRaises(ConfigurationError):
            CurriculumLoader.from_dict({"semesters": [{"courses": [{"units": 3}]}]})
        with self.assertRaises(ConfigurationError):
            CurriculumLoader.from_dict({"semesters": [{"courses": [{"name": "X", "units": 3, "kind": "triple"}]}]})

    def test_bad_grading_scale_in_file(self):
        course = {"name": "Art", "units": 3, "sources": {"single": "mem://art"}}
        for scale in ({"AA": None}, {"AA": "x"}, None, ["AA", 4]):
            path = self.write_json({"grade_scale": scale, "semesters": [{"courses": [course]}]})
            with self.assertRaises(ConfigurationError):
                CurriculumLoader().load(path)


if __name__ == "__main__":
    unittest.main()

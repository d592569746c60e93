# pylint: disable=missing-docstring
from dataclasses import dataclass

from django.test import SimpleTestCase

from fieldshaper.cache import PropertyCache
from fieldshaper.service import DataShapingService
from fieldshaper.test_helpers.models import Habit


@dataclass
class Workout:
    id: int
    name: str
    length: int


class Empty:
    pass


class DataShapingServiceTestCase(SimpleTestCase):
    def setUp(self):
        super().setUp()
        self.service = DataShapingService(cache=PropertyCache())
        self.workout = Workout(id=1, name="Run", length=30)
        self.workouts = [
            self.workout,
            Workout(id=2, name="Swim", length=45),
            Workout(id=3, name="Ride", length=90),
        ]

    def test_shape_data(self):
        self.assertEqual(self.service.shape_data(self.workout, "name"), {"name": "Run"})
        self.assertEqual(
            self.service.shape_data(self.workout, "NAME , Length"),
            {"name": "Run", "length": 30},
        )
        self.assertIn(Workout, self.service.cache)

    def test_shape_data_all_fields(self):
        expected = {"id": 1, "name": "Run", "length": 30}
        for fields in (None, "", "  ", ","):
            shaped = self.service.shape_data(self.workout, fields)
            self.assertEqual(shaped, expected)
            self.assertEqual(list(shaped), ["id", "name", "length"])

    def test_shape_data_unknown_fields(self):
        self.assertEqual(
            self.service.shape_data(self.workout, "name,color"), {"name": "Run"}
        )
        self.assertEqual(self.service.shape_data(self.workout, "color"), {})

    def test_shape_data_entity_type(self):
        habit = Habit(id=5, name="Read", length=20)
        shaped = self.service.shape_data(habit, "id,name,owner")
        self.assertEqual(shaped, {"id": 5, "name": "Read", "owner": None})

        # Shape through a different type sharing the same attributes.
        shaped = self.service.shape_data(habit, None, entity_type=Workout)
        self.assertEqual(shaped, {"id": 5, "name": "Read", "length": 20})

    def test_shape_data_no_properties(self):
        self.assertEqual(self.service.shape_data(Empty(), "name"), {})
        self.assertEqual(self.service.shape_data(Empty()), {})

    def test_shape_collection_data(self):
        for fields in (None, "id", "NAME,length", "name,unknown"):
            shaped = self.service.shape_collection_data(self.workouts, fields)
            self.assertEqual(len(shaped), len(self.workouts))
            for index, workout in enumerate(self.workouts):
                self.assertEqual(
                    shaped[index], self.service.shape_data(workout, fields)
                )

        self.assertEqual(
            self.service.shape_collection_data(self.workouts, "name"),
            [{"name": "Run"}, {"name": "Swim"}, {"name": "Ride"}],
        )

    def test_shape_collection_data_iterates_once(self):
        entities = (workout for workout in self.workouts)
        shaped = self.service.shape_collection_data(entities, "id")
        self.assertEqual(shaped, [{"id": 1}, {"id": 2}, {"id": 3}])

        entities = (workout for workout in self.workouts)
        shaped = self.service.shape_collection_data(entities, "id", entity_type=Workout)
        self.assertEqual(shaped, [{"id": 1}, {"id": 2}, {"id": 3}])

    def test_shape_collection_data_empty(self):
        self.assertEqual(self.service.shape_collection_data([], "name"), [])
        self.assertEqual(self.service.shape_collection_data(iter([])), [])
        self.assertEqual(
            self.service.shape_collection_data([], "name", entity_type=Workout), []
        )

    def test_validate(self):
        for fields in (None, "", "   "):
            self.assertTrue(self.service.validate(Workout, fields))

        self.assertTrue(self.service.validate(Workout, "name"))
        self.assertTrue(self.service.validate(Workout, "ID, Name ,LENGTH"))
        self.assertFalse(self.service.validate(Workout, "name,unknown"))
        self.assertFalse(self.service.validate(Workout, "name,color"))
        self.assertFalse(self.service.validate(Empty, "name"))
        self.assertTrue(self.service.validate(Empty, ""))

    def test_get_invalid_fields(self):
        self.assertEqual(self.service.get_invalid_fields(Workout, None), [])
        self.assertEqual(self.service.get_invalid_fields(Workout, "Name,Id"), [])
        self.assertEqual(
            self.service.get_invalid_fields(Workout, "Name,Color,COLOR,size"),
            ["Color", "size"],
        )

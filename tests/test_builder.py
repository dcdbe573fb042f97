import unittest

import pymunk

from plinko.builder import BoardBuilder
from plinko.layout import generate_layout
from plinko.world import World


class TestBoardBuilder(unittest.TestCase):
    def setUp(self):
        self.world = World.create()
        self.builder = BoardBuilder()

    def test_build_adds_one_static_body_per_element(self):
        geometry = generate_layout(4, 800, 600)
        entities = self.builder.build(self.world, geometry)
        expected = len(geometry.pegs) + 2 + 2 + len(geometry.bin_walls) + 1 + 3
        self.assertEqual(len(entities), expected)
        self.assertEqual(len(self.world), expected)
        self.assertEqual(len(self.world.space.shapes), expected)
        self.assertTrue(all(e.body.body_type == pymunk.Body.STATIC for e in entities))

        self.assertEqual(self.world.count("peg"), 10)
        self.assertEqual(self.world.count("funnel"), 2)
        self.assertEqual(self.world.count("guide"), 2)
        self.assertEqual(self.world.count("bin_wall"), 6)
        self.assertEqual(self.world.count("floor"), 1)
        self.assertEqual(self.world.count("boundary"), 3)

    def test_peg_material_and_position(self):
        geometry = generate_layout(2, 800, 600)
        self.builder.build(self.world, geometry)
        peg = self.world.entities("peg")[0]
        self.assertEqual(tuple(peg.body.position), (geometry.pegs[0].x, geometry.pegs[0].y))
        self.assertEqual(peg.shape.radius, geometry.pegs[0].radius)
        self.assertEqual(peg.shape.elasticity, geometry.pegs[0].restitution)
        self.assertEqual(peg.shape.friction, geometry.pegs[0].friction)

    def test_boundaries_are_hidden(self):
        self.builder.build(self.world, generate_layout(2, 800, 600))
        self.assertTrue(all(not e.style.visible for e in self.world.entities("boundary")))
        self.assertTrue(all(e.style.visible for e in self.world.entities("peg")))

    def test_clear_removes_everything(self):
        self.builder.build(self.world, generate_layout(5, 800, 600))
        removed = self.builder.clear(self.world)
        self.assertGreater(removed, 0)
        self.assertEqual(len(self.world), 0)
        self.assertEqual(len(self.world.space.shapes), 0)

    def test_ids_are_unique(self):
        self.builder.build(self.world, generate_layout(3, 800, 600))
        self.builder.clear(self.world)
        self.builder.build(self.world, generate_layout(3, 800, 600))
        ids = [e.id for e in self.world.entities()]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertGreater(min(ids), 1)


if __name__ == "__main__":
    unittest.main()

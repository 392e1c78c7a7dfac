import unittest

from helpers import make_inventory, make_stone, two_rooms

from ruinlab.game.models import Interactable
from ruinlab.game.parser import Namespace, parse_input
from ruinlab.game.vocabulary import Intent


class ParserTests(unittest.TestCase):
    def setUp(self):
        self.room = two_rooms(interactables=[make_stone()])[0]
        self.inventory = make_inventory()

    def parse(self, line):
        return parse_input(line, self.room, self.inventory)

    def test_illegal_verb_stops_parsing(self):
        parsed = self.parse("dance north")
        self.assertFalse(parsed.legal)
        self.assertEqual(parsed.verb, "dance")
        self.assertEqual(parsed.object_noun, "")

    def test_verb_lookup_ignores_case(self):
        parsed = self.parse("GO North")
        self.assertTrue(parsed.legal)
        self.assertEqual(parsed.intent, Intent.MOVEMENT)
        self.assertEqual(parsed.object_noun, "north")
        self.assertTrue(parsed.is_direction)

    def test_each_namespace(self):
        self.assertEqual(self.parse("list inventory").namespace, Namespace.KEYWORD)
        self.assertTrue(self.parse("grab helmet").is_item)
        self.assertTrue(self.parse("push stone").is_interactable)

    def test_first_matching_token_wins(self):
        parsed = self.parse("use the pendant on the stone")
        self.assertEqual(parsed.object_noun, "pendant")
        self.assertTrue(parsed.is_item)
        self.assertFalse(parsed.is_interactable)

    def test_namespace_priority_within_a_token(self):
        # an interactable spelled like an item resolves as the item
        self.room.interactables.append(
            Interactable(
                id="helmet_statue",
                name="helmet",
                before_interaction_description="",
                after_interaction_description="",
                interaction_description="",
            )
        )
        parsed = self.parse("examine helmet")
        self.assertEqual(parsed.namespace, Namespace.ITEM)

        self.inventory["south"] = self.inventory["helmet"]
        self.assertEqual(self.parse("examine south").namespace, Namespace.DIRECTION)

    def test_no_match_leaves_noun_empty(self):
        parsed = self.parse("examine facewall")
        self.assertTrue(parsed.legal)
        self.assertEqual(parsed.intent, Intent.EXAMINE)
        self.assertEqual(parsed.object_noun, "")
        self.assertIsNone(parsed.namespace)


if __name__ == "__main__":
    unittest.main()

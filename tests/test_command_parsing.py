# tests/test_command_parsing.py
from tests.fixtures import CraftingTestBase, FLINT, IRON, STRIKER
from simplecraft.commands import Command, CommandError, CommandKind
from simplecraft.commands.command_system import command_groups, registered_commands
from simplecraft.config import NO_RECIPE_NAME

class TestCommandDecoding(CraftingTestBase):

    def setUp(self):
        super().setUp()
        self.processor = self.game.command_processor

    def test_decode_typed_arguments(self):
        self.assertEqual(self.processor.decode("add 3"), Command(CommandKind.ADD, (3,)))
        self.assertEqual(self.processor.decode("count 12"), Command(CommandKind.COUNT, (12,)))
        self.assertEqual(self.processor.decode("craft"), Command(CommandKind.CRAFT, ()))
        self.assertEqual(self.processor.decode("craft 4"), Command(CommandKind.CRAFT, (4,)))
        self.assertEqual(self.processor.decode("begin"), Command(CommandKind.BEGIN))

    def test_plugin_prefix_and_case(self):
        """'SimpleCrafting add 3' decodes the same as 'add 3'."""
        self.assertEqual(self.processor.decode("SimpleCrafting ADD 3"), Command(CommandKind.ADD, (3,)))
        self.assertEqual(self.processor.decode("  Restart  "), Command(CommandKind.RESTART))

    def test_aliases(self):
        self.assertEqual(self.processor.decode("make 1").kind, CommandKind.CRAFT)
        self.assertEqual(self.processor.decode("i").kind, CommandKind.INVENTORY)

    def test_text_payload_kept_verbatim(self):
        cmd = self.processor.decode(r"show You have \CCount Items")
        self.assertEqual(cmd, Command(CommandKind.SHOW, (), r"You have \CCount Items"))

    def test_blank_input(self):
        self.assertIsNone(self.processor.decode("   "))
        self.assertEqual(self.game.process_command(""), "")

    def test_decode_errors(self):
        for bad in ("xyzzy", "add", "add flint", "count", "count 1 2", "simplecrafting"):
            with self.subTest(text=bad):
                with self.assertRaises(CommandError):
                    self.processor.decode(bad)

    def test_unknown_command(self):
        result = self.game.process_command("xyzzy")
        self.assertIn("Unknown command: xyzzy", result)

    def test_bad_argument_reports_usage(self):
        result = self.game.process_command("add flint")
        self.assertIn("not a number", result)
        self.assertIn("add <itemId>", result)

class TestCraftingCommands(CraftingTestBase):

    def test_full_craft_sequence(self):
        self.give(FLINT)
        self.give(IRON)
        self.game.process_command("SimpleCrafting begin")
        self.game.process_command("SimpleCrafting add 1")
        self.game.process_command("SimpleCrafting add 2")
        self.game.process_command("SimpleCrafting count 5")
        self.assertEqual(self.game.variables.value(5), 2)

        result = self.game.process_command("SimpleCrafting craft 7")
        self.assertIn("a Striker", result)
        self.assertTrue(self.game.switches.value(7))
        self.assertEqual(self.inventory.count_item(STRIKER), 1)

    def test_failed_craft_sets_switch_off(self):
        self.give(IRON)
        self.game.switches.set_value(3, True)
        self.game.process_command("add 2")
        result = self.game.process_command("craft 3")

        self.assertFalse(self.game.switches.value(3))
        self.assertIn("returned", result)
        self.assertEqual(self.inventory.count_item(IRON), 1)

    def test_craft_without_switch(self):
        result = self.game.process_command("craft")
        self.assertIn("No ingredients", result)

    def test_add_missing_item_message(self):
        result = self.game.process_command("add 1")
        self.assertIn("don't have any Flint", result)
        self.assertEqual(self.session.ingredient_count(), 0)

    def test_add_reports_selection(self):
        self.give(FLINT)
        result = self.game.process_command("add 1")
        self.assertIn("You add", result)
        self.assertIn("1 Ingredients Selected", result)

    def test_cancel_and_restart(self):
        self.give(FLINT, 2)
        self.game.process_command("add 1")
        self.assertIn("1 ingredient(s) returned", self.game.process_command("restart"))
        self.game.process_command("add 1")
        self.assertIn("1 ingredient(s) returned", self.game.process_command("cancel"))
        self.assertEqual(self.inventory.count_item(FLINT), 2)
        self.assertEqual(self.session.last_crafted_name(), NO_RECIPE_NAME)

class TestHostCommands(CraftingTestBase):

    def test_give_and_inventory(self):
        self.assertIn("Gained 2 x Flint", self.game.process_command("give 1 2"))
        self.assertEqual(self.inventory.count_item(FLINT), 2)
        self.assertIn("Flint", self.game.process_command("inventory"))

    def test_give_unknown_item(self):
        self.assertIn("No item with id 99", self.game.process_command("give 99"))
        self.assertIn("positive", self.game.process_command("give 1 0"))

    def test_show_expands_codes(self):
        self.give(FLINT)
        self.game.process_command("add 1")
        self.assertEqual(self.game.process_command(r"show \CCount: \CItem[0]"), "1: Flint")

    def test_var_and_switch(self):
        self.game.variables.set_value(2, 9)
        self.assertEqual(self.game.process_command("var 2"), "Variable 2 = 9")
        self.assertEqual(self.game.process_command("switch 4"), "Switch 4 is OFF")

    def test_help(self):
        self.assertIn("craft", self.game.process_command("help"))
        self.assertIn("Usage:", self.game.process_command("help add"))
        self.assertIn("No help found", self.game.process_command("help nothing"))

class TestCommandRegistry(CraftingTestBase):

    def test_every_kind_registered_under_name_and_aliases(self):
        for kind in CommandKind:
            self.assertIs(registered_commands[kind.value]["kind"], kind)
        self.assertIs(registered_commands["make"], registered_commands["craft"])
        self.assertIs(registered_commands["i"], registered_commands["inventory"])

    def test_command_groups_by_category(self):
        crafting = {cmd["name"] for cmd in command_groups["crafting"]}
        self.assertEqual(crafting, {"begin", "add", "cancel", "count", "craft", "restart"})
        host = {cmd["name"] for cmd in command_groups["host"]}
        self.assertEqual(host, {"give", "inventory", "show", "var", "switch", "help"})

class TestGameState(CraftingTestBase):

    def test_variables_and_switches_default_and_store(self):
        self.assertEqual(self.game.variables.value(5), 0)
        self.assertFalse(self.game.switches.value(5))
        self.game.variables.set_value(5, True)
        self.game.switches.set_value(5, 1)
        self.assertEqual(self.game.variables.value(5), 1)
        self.assertIs(self.game.switches.value(5), True)

    def test_count_command_writes_variable(self):
        self.give(FLINT)
        self.give(IRON)
        self.game.process_command("begin")
        self.game.process_command("add 1")
        self.game.process_command("add 2")
        self.game.process_command("count 7")
        self.assertEqual(self.game.variables.value(7), 2)

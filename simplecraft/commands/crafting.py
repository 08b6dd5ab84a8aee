# simplecraft/commands/crafting.py
from simplecraft.commands.command_system import Command, CommandKind, command
from simplecraft.config import FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS

@command(CommandKind.BEGIN, ["start"], "crafting", "Start a new crafting session.\nAny ingredients still selected are returned first.")
def begin_handler(cmd: Command, context) -> str:
    session = context.crafting_session
    session.begin()
    return f"{FORMAT_CATEGORY}You begin a new crafting session.{FORMAT_RESET}"

@command(CommandKind.ADD, ["put"], "crafting", "Add one unit of an item to the session.\nIngredient order matters.", args=["itemId"])
def add_handler(cmd: Command, context) -> str:
    session = context.crafting_session
    item_id = cmd.arg(0)
    if not session.add_ingredient(item_id):
        item = context.item_registry.get(item_id)
        name = item.name if item else f"item {item_id}"
        return f"{FORMAT_ERROR}You don't have any {name}.{FORMAT_RESET}"
    return f"You add {FORMAT_HIGHLIGHT}{session.ingredient_name_at(session.ingredient_count() - 1)}{FORMAT_RESET}.\n{session.list_ingredients()}"

@command(CommandKind.CANCEL, ["stop"], "crafting", "End the session without crafting.\nSelected ingredients are returned.")
def cancel_handler(cmd: Command, context) -> str:
    session = context.crafting_session
    returned = session.ingredient_count()
    session.cancel()
    return f"{FORMAT_CATEGORY}Crafting cancelled. {returned} ingredient(s) returned.{FORMAT_RESET}"

@command(CommandKind.COUNT, [], "crafting", "Store the number of selected ingredients in a variable.", args=["varId"])
def count_handler(cmd: Command, context) -> str:
    session = context.crafting_session
    var_id = cmd.arg(0)
    context.variables.set_value(var_id, session.ingredient_count())
    return f"Variable {var_id} = {session.ingredient_count()}"

@command(CommandKind.CRAFT, ["make"], "crafting", "Attempt to craft with the selected ingredients.\nThe result (on/off) is stored in the switch, if given.", args=["[switchId]"])
def craft_handler(cmd: Command, context) -> str:
    session = context.crafting_session
    switch_id = cmd.arg(0)
    used = session.ingredient_count()
    success = session.craft()
    if switch_id is not None:
        context.switches.set_value(switch_id, success)

    if success:
        return f"{FORMAT_SUCCESS}You crafted {session.last_crafted_name()}!{FORMAT_RESET}"
    if used and session.return_items_on_fail:
        return f"{FORMAT_ERROR}Nothing happens. Your {used} ingredient(s) are returned.{FORMAT_RESET}"
    if used:
        return f"{FORMAT_ERROR}Nothing happens. Your {used} ingredient(s) are lost.{FORMAT_RESET}"
    return f"{FORMAT_ERROR}Nothing happens. No ingredients were selected.{FORMAT_RESET}"

@command(CommandKind.RESTART, ["clear"], "crafting", "Return the selected ingredients and start selecting again.")
def restart_handler(cmd: Command, context) -> str:
    session = context.crafting_session
    returned = session.ingredient_count()
    session.restart()
    return f"{FORMAT_CATEGORY}{returned} ingredient(s) returned. Select again.{FORMAT_RESET}"

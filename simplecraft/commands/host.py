# simplecraft/commands/host.py
from simplecraft.commands.command_system import Command, CommandKind, command
from simplecraft.config import FORMAT_ERROR, FORMAT_RESET, FORMAT_SUCCESS

@command(CommandKind.GIVE, ["gain"], "host", "Add items to the inventory.\nUsage: give <itemId> [qty]", args=["itemId", "[qty]"])
def give_handler(cmd: Command, context) -> str:
    item_id = cmd.arg(0)
    quantity = cmd.arg(1, 1)
    item = context.item_registry.get(item_id)
    if not item:
        return f"{FORMAT_ERROR}No item with id {item_id}.{FORMAT_RESET}"
    if quantity <= 0:
        return f"{FORMAT_ERROR}Quantity must be positive.{FORMAT_RESET}"
    context.inventory.add_item(item, quantity)
    return f"{FORMAT_SUCCESS}Gained {quantity} x {item.name}.{FORMAT_RESET}"

@command(CommandKind.INVENTORY, ["inv", "i"], "host", "Show the inventory.")
def inventory_handler(cmd: Command, context) -> str:
    return context.inventory.list_items()

@command(CommandKind.SHOW, ["say", "text"], "host", "Show a message, expanding \\CItem[n], \\CCount and \\CLast.", takes_text=True)
def show_handler(cmd: Command, context) -> str:
    return context.crafting_session.expand_text_codes(cmd.text)

@command(CommandKind.VARIABLE, ["variable"], "host", "Show the value of a game variable.", args=["varId"])
def variable_handler(cmd: Command, context) -> str:
    var_id = cmd.arg(0)
    return f"Variable {var_id} = {context.variables.value(var_id)}"

@command(CommandKind.SWITCH, ["sw"], "host", "Show the state of a game switch.", args=["switchId"])
def switch_handler(cmd: Command, context) -> str:
    switch_id = cmd.arg(0)
    state = "ON" if context.switches.value(switch_id) else "OFF"
    return f"Switch {switch_id} is {state}"

@command(CommandKind.HELP, ["?"], "host", "Show help for all commands or one command.", takes_text=True)
def help_handler(cmd: Command, context) -> str:
    processor = context.command_processor
    if cmd.text:
        return processor.get_command_help(cmd.text.split()[0])
    return processor.get_help_text()

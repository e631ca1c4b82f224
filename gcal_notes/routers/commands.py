"""
Commands router - the plugin's command palette entries.

The command flow:
1. The host lists commands with GET /commands
2. The user picks one; the host calls POST /commands/{command_id}
3. gcal:open-view opens the day view and returns its state
4. gcal:insert-events returns the text to insert at the cursor
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from gcal_notes.deps import get_plugin
from gcal_notes.plugin import COMMANDS, INSERT_EVENTS_COMMAND, OPEN_VIEW_COMMAND, CalendarPlugin
from gcal_notes.schemas.day_view import DayViewSnapshot


logger = logging.getLogger("gcal.routers.commands")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/commands", tags=["commands"])


# ---------------------------------------------------------------------------
# RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class CommandInfo(BaseModel):
    """
    One palette entry.

    Example response:
    {
        "id": "gcal:insert-events",
        "name": "Insert today's events"
    }
    """
    id: str
    name: str


class CommandResult(BaseModel):
    """
    Result of running a command.

    Example response (gcal:insert-events):
    {
        "command_id": "gcal:insert-events",
        "text": "## Mon Jan 15 2024 Events\\n\\n- **All-day**: Offsite\\n",
        "view": null
    }
    """
    command_id: str
    text: Optional[str] = None
    view: Optional[DayViewSnapshot] = None


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.get("", response_model=List[CommandInfo])
async def list_commands():
    return [CommandInfo(id=command.id, name=command.name) for command in COMMANDS.values()]


@router.post("/{command_id}", response_model=CommandResult)
async def run_command(
    command_id: str,
    plugin: CalendarPlugin = Depends(get_plugin),
):
    """
    Run a command.

    Raises:
        404: Unknown command id
    """
    if command_id not in COMMANDS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown command: {command_id}",
        )

    logger.info(f"Running command {command_id}")

    if command_id == OPEN_VIEW_COMMAND.id:
        view = await plugin.activate_view()
        return CommandResult(command_id=command_id, view=view.snapshot())

    if command_id == INSERT_EVENTS_COMMAND.id:
        text = await plugin.insert_events()
        return CommandResult(command_id=command_id, text=text)

    # Registered but not dispatched above
    raise HTTPException(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        detail=f"Command not wired: {command_id}",
    )

from fastapi import APIRouter, HTTPException, Request

from ..app_state import AppState
from ..events import MessageEvent
from ..handler import handle_message

router = APIRouter()


def _get_state(request: Request) -> AppState:
  return request.app.state.context


@router.post("/api/messages")
async def receive_message(request: Request):
  try:
    payload = await request.json()
  except ValueError as exc:
    raise HTTPException(status_code=400, detail="Body must be JSON.") from exc
  if not isinstance(payload, dict):
    raise HTTPException(status_code=400, detail="Message object is required.")
  try:
    event = MessageEvent.from_payload(payload)
  except ValueError as exc:
    raise HTTPException(status_code=400, detail=str(exc)) from exc

  state = _get_state(request)
  result = await handle_message(event, state.chat_client, report=state.report)
  return {"id": event.id, "status": result.value}

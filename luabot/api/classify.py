from fastapi import APIRouter, HTTPException, Request

from ..events import split_lines
from ..segmenter import get_blocks

router = APIRouter()


@router.post("/api/classify")
async def classify_message(request: Request):
  """Label a message without posting anything."""
  try:
    payload = await request.json()
  except ValueError as exc:
    raise HTTPException(status_code=400, detail="Body must be JSON.") from exc
  content = payload.get("content") if isinstance(payload, dict) else None
  if not isinstance(content, str):
    raise HTTPException(status_code=400, detail="content is required.")

  blocks = get_blocks(split_lines(content), report=request.app.state.context.report)
  return {
    "has_code": bool(blocks),
    "lines": [{"line": block.text, "is_code": block.is_code} for block in blocks],
  }

"""
Adoption endpoints: the adoption log and the Adoption Workflow.
"""

from fastapi import APIRouter, Depends

from ..services import AdoptionWorkflow
from ..utils.helpers import success_response
from .dependencies import get_adoption_workflow

router = APIRouter(prefix="/api/adoptions", tags=["adoptions"])


@router.get("")
async def get_all_adoptions(workflow: AdoptionWorkflow = Depends(get_adoption_workflow)):
    """List all adoption records."""
    return success_response(payload=await workflow.list_adoptions())


@router.get("/{aid}")
async def get_adoption(aid: str, workflow: AdoptionWorkflow = Depends(get_adoption_workflow)):
    """Get one adoption record by ID."""
    return success_response(payload=await workflow.get_adoption(aid))


@router.post("/{uid}/{pid}")
async def create_adoption(
    uid: str,
    pid: str,
    workflow: AdoptionWorkflow = Depends(get_adoption_workflow)
):
    """Adopt pet ``pid`` for user ``uid``."""
    await workflow.adopt(uid, pid)
    return success_response(message="Pet adopted")

"""Menu API endpoints."""

import logging
from typing import Literal, Optional, Union

from fastapi import APIRouter, Depends, Query

from normand.api.deps import get_menu_service, require_admin
from normand.api.schemas import (
    AutoSyncResponse,
    DetailedStatusResponse,
    FileStatusModel,
    MenuResponse,
    MenuUpdate,
    MenuValidationResponse,
    MenuWriteResponse,
    SyncStatus,
)
from normand.errors import ValidationError
from normand.menu.service import MenuService, MenuValidation
from normand.menu.store import FileStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/menu", tags=["menu"], dependencies=[Depends(require_admin)])

MenuAction = Literal["validate", "sync", "status"]


def _file_status_model(status: FileStatus) -> FileStatusModel:
    return FileStatusModel(
        path=status.path,
        exists=status.exists,
        last_modified=status.last_modified,
        item_count=status.item_count,
    )


def _validation_response(validation: MenuValidation) -> MenuValidationResponse:
    return MenuValidationResponse(
        sync=validation.report,
        html_menu=validation.html_menu,
        json_menu=validation.json_menu,
        last_checked=validation.last_checked,
    )


@router.get("", response_model=None)
async def get_menu(
    action: Optional[MenuAction] = Query(None, description="validate, sync or status"),
    service: MenuService = Depends(get_menu_service),
) -> Union[MenuResponse, MenuValidationResponse, AutoSyncResponse, DetailedStatusResponse]:
    """Get the menu, or run a sync action on it.

    Without ``action`` returns the stored document with a lightweight sync
    summary. ``validate`` returns the full report, ``sync`` merges HTML-only
    entries into the document and saves it, ``status`` adds file details.
    """
    if action == "validate":
        return _validation_response(service.validate())

    if action == "sync":
        outcome = service.auto_sync()
        return AutoSyncResponse(
            message=outcome.message,
            added_items=outcome.added_items,
            was_already_in_sync=outcome.was_already_in_sync,
            synced_menu=outcome.synced_menu,
            skipped_ids=outcome.skipped_ids,
        )

    if action == "status":
        validation, html_status, json_status = service.detailed_status()
        return DetailedStatusResponse(
            sync=validation.report,
            html_menu=validation.html_menu,
            json_menu=validation.json_menu,
            last_checked=validation.last_checked,
            files={
                "html": _file_status_model(html_status),
                "json": _file_status_model(json_status),
            },
        )

    document, summary = service.summary()
    sync_status = SyncStatus(
        is_in_sync=summary.is_in_sync,
        issue_count=summary.issue_count,
        last_checked=summary.last_checked,
    )
    # A stored syncStatus key is stale; the fresh one replaces it.
    return MenuResponse.model_validate({**document.to_json_dict(), "syncStatus": sync_status})


@router.api_route("", methods=["POST", "PUT"], response_model=MenuWriteResponse)
async def replace_menu(
    data: MenuUpdate,
    service: MenuService = Depends(get_menu_service),
) -> MenuWriteResponse:
    """Replace the whole menu and regenerate the navigation markup from it."""
    outcome = service.replace_menu(data.main_menu)
    return MenuWriteResponse(
        message="Menu updated successfully",
        data=outcome.document,
        updated_html_files=outcome.updated_html_files,
    )


@router.delete("", response_model=MenuWriteResponse)
async def delete_menu_item(
    item_id: Optional[str] = Query(None, alias="itemId", description="Id of the entry to remove"),
    service: MenuService = Depends(get_menu_service),
) -> MenuWriteResponse:
    """Remove a top-level or nested entry by id."""
    if not item_id:
        raise ValidationError("Item ID required")

    outcome = service.delete_entry(item_id)
    logger.info(f"Deleted menu item {item_id}")
    return MenuWriteResponse(
        message="Menu item deleted successfully",
        data=outcome.document,
        updated_html_files=outcome.updated_html_files,
    )

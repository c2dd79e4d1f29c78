# controller/meta_controller.py
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from config.settings import settings
from controller.controller_dependencies import get_link_service, get_suggestion_service
from model.api import HelpResponse, HistoryEntryView, HistoryResponse, ListResponse
from service.link_service import LinkService
from service.suggestion_service import SuggestionService
from util.constants import InternalURIs, OPENSEARCH_TEMPLATE

meta_router = APIRouter()

HELP_USAGE = [
    "<bookmark> <terms>  redirect to the bookmark with <terms> filled in",
    "<command> <args>    run a built-in command",
    "anything else       goes to the default search",
    "/<name>/<a>/<b>     path form of '<name> <a> <b>'",
    "?q=add <name> <url> add a bookmark (query form only)",
]


@meta_router.get(InternalURIs.HELP, response_model=HelpResponse)
async def help_page(service: LinkService = Depends(get_link_service)) -> HelpResponse:
    return HelpResponse(usage=HELP_USAGE, commands=service.list_commands())


@meta_router.get(InternalURIs.LIST, response_model=ListResponse)
async def list_page(service: LinkService = Depends(get_link_service)) -> ListResponse:
    return ListResponse(
        bookmarks=await service.list_bookmarks(),
        commands=service.list_commands(),
    )


@meta_router.get(InternalURIs.HISTORY, response_model=HistoryResponse)
async def history_page(
    service: LinkService = Depends(get_link_service),
) -> HistoryResponse:
    entries = await service.list_history()
    return HistoryResponse(entries=[HistoryEntryView.from_entry(e) for e in entries])


@meta_router.get(InternalURIs.OPENSEARCH)
async def opensearch() -> Response:
    body = OPENSEARCH_TEMPLATE.format(title=settings.TITLE, fqdn=settings.FQDN)
    return Response(content=body, media_type="text/xml")


@meta_router.get(InternalURIs.SUGGEST)
async def suggest(
    q: str = "",
    svc: SuggestionService = Depends(get_suggestion_service),
) -> Response:
    return Response(
        content=await svc.suggest(q),
        media_type="application/json; charset=utf-8",
    )

# controller/link_controller.py
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import Response
from controller.controller_dependencies import get_link_service
from service.link_service import LinkService
from util.constants import InternalURIs
from util.functions import split_query

link_router = APIRouter()


async def _dispatch_query(request: Request, q: str, service: LinkService) -> Response:
    if not q:
        return await service.handle(request, "", [])
    token, args = split_query(q)
    return await service.handle(request, token, args, query=q)


@link_router.get(InternalURIs.INDEX)
async def index(
    request: Request,
    q: str = "",
    service: LinkService = Depends(get_link_service),
) -> Response:
    return await _dispatch_query(request, q, service)


@link_router.post(InternalURIs.INDEX)
async def index_form(
    request: Request,
    q: str = Form(default=""),
    service: LinkService = Depends(get_link_service),
) -> Response:
    # ?q= wins over the form field
    return await _dispatch_query(request, request.query_params.get("q") or q, service)


@link_router.get(InternalURIs.COMMAND)
async def run_command(
    request: Request,
    command: str,
    service: LinkService = Depends(get_link_service),
) -> Response:
    return await service.handle(request, command, [])


@link_router.get(InternalURIs.COMMAND_ARGS)
async def run_command_with_args(
    request: Request,
    command: str,
    args: str,
    service: LinkService = Depends(get_link_service),
) -> Response:
    return await service.handle(request, command, args.split("/"))

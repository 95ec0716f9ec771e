"""Link API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from revlink.address.codec import decode
from revlink.api.dependencies import LinkServiceDep
from revlink.core.models.address import Address
from revlink.core.models.remote import ExportedLink, RepositorySnapshot

router = APIRouter(prefix="/links")


class DecodeRequest(BaseModel):
    """Request model for the decode endpoint."""

    address: str = Field(..., description="Link address")
    strict: bool = Field(default=False, description="Reject incomplete addresses")


class ResolveRequest(BaseModel):
    """Request model for resolving against supplied repository facts."""

    revision: str = Field(..., min_length=1)
    file_path: str = Field(..., min_length=1)
    repository: RepositorySnapshot = Field(default_factory=RepositorySnapshot)


class ResolveResponse(BaseModel):
    url: str


class ExportRequest(BaseModel):
    """Request model for exporting a stored address."""

    address: str = Field(..., min_length=1)
    description: str | None = None
    format: str | None = Field(default=None, description="Output format")


@router.post("/decode", response_model=Address)
def decode_address(request: DecodeRequest) -> Address:
    """Split a link address into its fields."""
    return decode(request.address, strict=request.strict)


@router.post("/resolve", response_model=ResolveResponse)
def resolve(request: ResolveRequest, service: LinkServiceDep) -> ResolveResponse:
    """Resolve a revision and file against the given repository facts."""
    address = Address(
        repository_identifier="-",
        revision=request.revision,
        file_path=request.file_path,
    )
    return ResolveResponse(url=service.resolve_url(address, request.repository))


@router.post("/export", response_model=ExportedLink)
def export(request: ExportRequest, service: LinkServiceDep) -> ExportedLink:
    """Resolve a stored address through the local repository."""
    return service.export_link(
        request.address,
        description=request.description,
        fmt=request.format,
    )

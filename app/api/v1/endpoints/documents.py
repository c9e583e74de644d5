from app.api.v1.endpoints.crud import build_crud_router
from app.models.document import DocumentCreate, DocumentInDB
from app.repositories.document_repo import DocumentRepository

# file_data travels as base64 inside the JSON body
router = build_crud_router(DocumentRepository, DocumentCreate, DocumentInDB)

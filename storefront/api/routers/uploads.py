from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_asset_storage
from storefront.domain.errors import ValidationError
from storefront.domain.schemas import UploadOut
from storefront.services.asset_storage import AssetStorage

router = APIRouter(tags=["uploads"])

#nazwa pola formularza z obrazkiem
FIELD_NAME = "product"


@router.post("/upload", response_model=UploadOut)
def upload(
    product: UploadFile | None = File(None),
    storage: AssetStorage = Depends(get_asset_storage),
):
    if product is None:
        return JSONResponse(status_code=400, content={"success": 0, "message": "No file uploaded."})

    try:
        url = storage.save(FIELD_NAME, product.filename, product.file.read())
    except ValidationError as e:
        return JSONResponse(status_code=e.status_code, content={"success": 0, "message": e.message})
    return {"success": 1, "image_url": url}

import logging
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routers import health, analyze, prepare
from schemas import ErrorResponse

# アプリケーション全体のログレベル設定
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Image Text Extractor",
    description="画像からOCRでテキストを抽出し、Difyワークフローで構造化するAPI",
    version="0.1.0",
)

# CORS 設定
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ルーター登録
app.include_router(health.router)
app.include_router(analyze.router)
app.include_router(prepare.router)


# リクエスト形式の不正も { ok: false, error } 形式で返す
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning(f"Invalid request to {request.url.path}: {details}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=f"Invalid request: {details}").model_dump(),
    )


if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")

from typing import Optional
import logging
import cv2
import numpy as np
from fastapi import FastAPI, File, UploadFile, Query, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .config import DEFAULT_CONFIG
from .core import analyze_image
from .types import candidates_to_json

logger = logging.getLogger(__name__)

# one threshold pass per distinct 8-bit cut at most
MAX_LEVELS = 255
MAX_THRESH = 1000

app = FastAPI(title="Cube Detection API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def decode_upload_to_bgr(upload: UploadFile) -> np.ndarray:
    data = upload.file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Empty file.")
    arr = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(arr, cv2.IMREAD_COLOR)
    if img is None:
        raise HTTPException(status_code=400, detail="Could not decode image. Provide a valid JPG/PNG.")
    return img


@app.post("/detect")
def detect(
    file: UploadFile = File(...),
    thresh: Optional[int] = Query(None, ge=1, le=MAX_THRESH, description="Canny upper threshold"),
    levels: Optional[int] = Query(None, ge=1, le=MAX_LEVELS, description="Passes per colour plane"),
):
    img = decode_upload_to_bgr(file)
    try:
        config = DEFAULT_CONFIG.replace(thresh=thresh, levels=levels)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Detecting cube in {file.filename} ({img.shape[1]}x{img.shape[0]})")
    quads, verdict = analyze_image(img, config)

    payload = {
        "quadrilaterals": candidates_to_json(quads),
        "cube": verdict.to_dict(),
    }
    return JSONResponse(payload)

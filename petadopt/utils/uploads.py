"""
Storage of uploaded pet images on the local filesystem.
"""

import os
import re
from fastapi import UploadFile
import aiofiles
from loguru import logger

from ..schemas.identifiers import generate_object_id

CHUNK_SIZE = 64 * 1024


def safe_filename(filename: str) -> str:
    """
    Reduce a client-supplied file name to a safe basename.

    Args:
        filename: Original file name from the multipart part

    Returns:
        Basename containing only letters, digits, dots, dashes and underscores
    """
    basename = os.path.basename(filename.replace("\\", "/"))
    cleaned = re.sub(r"[^A-Za-z0-9._-]", "_", basename).lstrip(".")
    return cleaned or "image"


async def save_upload(upload: UploadFile, upload_dir: str) -> str:
    """
    Write an uploaded file under ``upload_dir`` with a unique name.

    Args:
        upload: Uploaded file
        upload_dir: Target directory, created if missing

    Returns:
        Path of the written file
    """
    os.makedirs(upload_dir, exist_ok=True)
    path = os.path.join(upload_dir, f"{generate_object_id()}-{safe_filename(upload.filename or '')}")

    try:
        async with aiofiles.open(path, "wb") as out:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                await out.write(chunk)
    except Exception as e:
        logger.error(f"Failed to store upload {upload.filename!r}: {e}")
        raise
    finally:
        await upload.close()

    logger.info(f"Stored uploaded image at {path}")
    return path

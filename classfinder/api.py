"""FastAPI service searching PHP classes inside an uploaded repo archive."""

from __future__ import annotations

import argparse
import zipfile
from pathlib import Path
from tempfile import TemporaryDirectory

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse
from networkx.readwrite import json_graph

from .config import resolve_finder_config
from .finder import ClassFinder
from .graph import build_hierarchy_graph
from .models import Declaration, Relation


app = FastAPI(title="PHP Class Finder API")


def _extract_zip_bytes(zip_bytes: bytes, target_dir: Path) -> Path:
    if not zip_bytes:
        raise HTTPException(status_code=400, detail="Empty archive.")

    archive_path = target_dir / "repo.zip"
    archive_path.write_bytes(zip_bytes)

    try:
        with zipfile.ZipFile(archive_path) as archive:
            archive.extractall(target_dir / "repo")
    except zipfile.BadZipFile as exc:
        raise HTTPException(status_code=400, detail="Invalid zip archive.") from exc

    extracted_root = target_dir / "repo"
    entries = list(extracted_root.iterdir())
    if len(entries) == 1 and entries[0].is_dir():
        return entries[0]
    return extracted_root


def _read_upload(file: UploadFile | None) -> bytes:
    if file is None:
        raise HTTPException(status_code=400, detail="Provide a zip file upload.")
    if not file.filename or not file.filename.lower().endswith(".zip"):
        raise HTTPException(status_code=400, detail="Upload a .zip archive.")
    return file.file.read()


def _relative_record(declaration: Declaration, root: Path) -> dict:
    record = declaration.to_dict()
    record["file"] = Path(declaration.path).relative_to(root).as_posix()
    return record


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/find")
def find_classes(
    target: str = Query(..., min_length=1),
    relation: Relation = Query(default=Relation.EXTENDS),
    file: UploadFile | None = File(default=None),
) -> JSONResponse:
    zip_bytes = _read_upload(file)

    with TemporaryDirectory() as temp_dir:
        root = _extract_zip_bytes(zip_bytes, Path(temp_dir))
        finder = ClassFinder(config=resolve_finder_config())
        results = finder.find(root, target, relation)
        return JSONResponse(
            content={
                "target": target,
                "relation": relation.value,
                "count": len(results),
                "results": [_relative_record(item, root) for item in results],
            }
        )


@app.post("/graph")
def hierarchy_graph(file: UploadFile | None = File(default=None)) -> JSONResponse:
    zip_bytes = _read_upload(file)

    with TemporaryDirectory() as temp_dir:
        root = _extract_zip_bytes(zip_bytes, Path(temp_dir))
        finder = ClassFinder(config=resolve_finder_config())
        graph = build_hierarchy_graph(finder.scan_directory(root))
        for _, attrs in graph.nodes(data=True):
            if attrs.get("path"):
                attrs["path"] = Path(attrs["path"]).relative_to(root).as_posix()
        return JSONResponse(content=json_graph.node_link_data(graph))


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the PHP class finder API server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", type=int, default=9000, help="Bind port")
    args = parser.parse_args()

    import uvicorn

    uvicorn.run("classfinder.api:app", host=args.host, port=args.port, reload=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from fastapi import FastAPI, Body
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Record Store", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/record_stub") if os.path.exists("/record_stub") else Path(__file__).resolve().parents[2] / "record_stub"

TABLES: dict[str, list[dict]] = {}


def table(name: str) -> list[dict]:
    if name not in TABLES:
        file = DATA_DIR / f"{name}.json"
        TABLES[name] = json.loads(file.read_text()) if file.exists() else []
    return TABLES[name]


def matches(row: dict, where: list[dict]) -> bool:
    return all(row.get(w["field"], False) in w["values"] for w in where)


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/v1/tables/{name}/query")
def query(name: str, params: dict = Body(...)):
    rows = [r for r in table(name) if matches(r, params.get("where", []))]
    for order in reversed(params.get("order_by", [])):
        rows.sort(key=lambda r: str(r.get(order["field"]) or ""), reverse=order["direction"] == "DESC")
    fields = params.get("fields") or []
    return {"success": True, "data": [{f: r.get(f) for f in fields} if fields else r for r in rows]}

@app.post("/v1/tables/{name}/records")
def create(name: str, body: dict = Body(...)):
    rows = table(name)
    results = []
    for record in body["records"]:
        record = {**record, "Id": max((r["Id"] for r in rows), default=0) + 1, "IsDeleted": False}
        rows.append(record)
        results.append({"success": True, "data": record})
    return {"success": True, "results": results}

@app.patch("/v1/tables/{name}/records")
def update(name: str, body: dict = Body(...)):
    rows = {r["Id"]: r for r in table(name)}
    results = []
    for record in body["records"]:
        if record.get("Id") not in rows:
            results.append({"success": False, "message": f"Record {record.get('Id')} not found"})
            continue
        rows[record["Id"]].update(record)
        results.append({"success": True, "data": rows[record["Id"]]})
    return {"success": True, "results": results}

@app.delete("/v1/tables/{name}/records")
def delete(name: str, body: dict = Body(...)):
    for r in table(name):
        if r["Id"] in body["record_ids"]:
            r["IsDeleted"] = True
    return {"success": True}

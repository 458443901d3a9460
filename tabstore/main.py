from fastapi import FastAPI, UploadFile, File, HTTPException
from .errors import SchemaMismatch
from .models import HealthResponse, SchemaIssue, TableResponse
from .revenue import compute_revenue
from .store import TabularStore

app = FastAPI(
    title="tabstore",
    description="Comma-delimited table loading and revenue analysis",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/table", response_model=TableResponse)
async def load_table(file: UploadFile = File(...)):
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    store = TabularStore()
    store.load_bytes(raw, file.filename)

    resp = TableResponse(
        source=file.filename,
        header=store.header,
        rows=store.rows,
        row_count=store.row_count,
    )
    if store.row_count:
        try:
            resp.revenue = compute_revenue(store.header, store.rows)
        except SchemaMismatch as e:
            resp.errors.append(SchemaIssue(missing=e.missing))
    return resp

"""Admin routes for the file server hit counter."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from api.dependencies import get_metrics
from api.metrics import ServerMetrics

router = APIRouter(tags=["admin"])

METRICS_PAGE = """<html>

<body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
</body>

</html>
"""


@router.get("/admin/metrics", response_class=HTMLResponse)
def metrics(server_metrics: ServerMetrics = Depends(get_metrics)):
    return METRICS_PAGE.format(hits=server_metrics.hits)


@router.get("/api/reset", response_class=PlainTextResponse)
def reset(server_metrics: ServerMetrics = Depends(get_metrics)):
    server_metrics.reset()
    return "Hits reset to 0"

"""Monthly revenue fixture."""

from dashboard_data.models.common import Revenue

DEMO_REVENUE: list[Revenue] = [
    Revenue(month="Jan", revenue=2000),
    Revenue(month="Feb", revenue=1800),
    Revenue(month="Mar", revenue=2200),
    Revenue(month="Apr", revenue=2500),
    Revenue(month="May", revenue=2300),
    Revenue(month="Jun", revenue=3200),
    Revenue(month="Jul", revenue=3500),
    Revenue(month="Aug", revenue=3700),
    Revenue(month="Sep", revenue=2500),
    Revenue(month="Oct", revenue=2800),
    Revenue(month="Nov", revenue=3000),
    Revenue(month="Dec", revenue=4800),
]

from __future__ import annotations

from core.app_logging import get_app_logger, trace
from data.data_client import DataClient

logger = get_app_logger()


SAMPLE_CONTRACTS = [
    {
        "Contract_Number": "C-2024-001",
        "Customer Name": "أحمد محمد الصالح",
        "Ad Type": "إعلان تجاري",
        "Start Date": "2024-01-15",
        "End Date": "2024-07-15",
        "Total Rent": 5000,
        "status": "نشط",
        "Phone": "0912345678",
        "billboards": [
            {
                "id": "1",
                "name": "لوحة شارع الجمهورية",
                "location": "شارع الجمهورية - طرابلس",
                "size": "6x4 متر",
                "image": "/billboard-city.jpg",
            }
        ],
    },
    {
        "Contract_Number": "C-2024-002",
        "Customer Name": "شركة النور للتجارة",
        "Ad Type": "إعلان مؤسسي",
        "Start Date": "2024-02-01",
        "End Date": "2024-08-01",
        "Total Rent": 7500,
        "status": "نشط",
        "Phone": "0923456789",
        "billboards": [
            {
                "id": "2",
                "name": "لوحة الطريق الساحلي",
                "location": "الطريق الساحلي - طرابلس",
                "size": "8x6 متر",
                "image": "/billboard-coastal.jpg",
            }
        ],
    },
    {
        "Contract_Number": "C-2024-003",
        "Customer Name": "مطعم الأصالة",
        "Ad Type": "إعلان مطعم",
        "Start Date": "2024-03-01",
        "End Date": "2024-12-01",
        "Total Rent": 3000,
        "status": "منتهي",
        "Phone": "0934567890",
        "billboards": [
            {
                "id": "3",
                "name": "لوحة الطريق السريع",
                "location": "الطريق السريع - طرابلس",
                "size": "4x3 متر",
                "image": "/billboard-highway.jpg",
            }
        ],
    },
]


@trace
def seed_sample_data(client: DataClient) -> bool:
    """Insert the sample customers, contracts and billboards into an empty store."""
    existing = client.table("Contract").select("Contract_Number").limit(1).execute()
    if not existing.ok or existing.data:
        return False

    for sample in SAMPLE_CONTRACTS:
        customer = client.table("customers").insert(
            {"name": sample["Customer Name"], "phone": sample["Phone"]}
        ).select().execute()
        if not customer.ok:
            logger.warning(f"Could not seed customer {sample['Customer Name']}: {customer.error}")
            return False

        contract_row = {k: v for k, v in sample.items() if k != "billboards"}
        contract_row["customer_id"] = customer.data[0]["id"]
        steps = [client.table("Contract").insert(contract_row)]
        for billboard in sample["billboards"]:
            steps.append(client.table("billboards").insert(billboard))
            steps.append(
                client.table("contract_billboards").insert(
                    {"contract_number": sample["Contract_Number"], "billboard_id": billboard["id"]}
                )
            )
        for step in steps:
            result = step.execute()
            if not result.ok:
                logger.warning(f"Could not seed {sample['Contract_Number']}: {result.error}")
                return False
    return True

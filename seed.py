from datetime import timedelta

from app.bootstrap import ensure_requests_collection
from app.database import close_client, get_db
from app.models.request import RequestStatus, new_request_document

db = get_db()
requests = ensure_requests_collection(db)

# Clear existing data
requests.delete_many({})

# Sample requests
samples = [
    ("Alice Johnson", "Standing desk", RequestStatus.PENDING),
    ("Bob Smith", "27 inch monitor", RequestStatus.PENDING),
    ("Carla Gomez", "Noise cancelling headphones", RequestStatus.APPROVED),
    ("Dev Patel", "Ergonomic keyboard", RequestStatus.COMPLETED),
    ("Erin Walsh", "Second laptop charger", RequestStatus.REJECTED),
    ("Farid Khan", "USB-C docking station", RequestStatus.PENDING),
]

docs = []
for age_days, (name, item, status) in enumerate(reversed(samples)):
    doc = new_request_document(name, item)
    doc["createdDate"] -= timedelta(days=age_days)
    doc["status"] = status.value
    docs.append(doc)

requests.insert_many(docs)
close_client()

print("Database seeded successfully!")
print(f"  - {len(docs)} requests")

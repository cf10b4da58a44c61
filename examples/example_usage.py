"""Example: talk to a running server through the Python client.

Start the API first (``flask --app src.smart_campus.smart_campus.main:create_app run``),
then run this script from the repository root.
"""

import os

from src.smart_campus.smart_campus.client.session import ApiSession, CampusClient, FileTokenStore


def main():
    session = ApiSession(
        os.getenv("CAMPUS_API_URL", "http://127.0.0.1:5000"),
        store=FileTokenStore(os.path.expanduser("~/.smart_campus/token")),
    )
    client = CampusClient(session)

    if not session.is_authenticated:
        client.login(email="admin@example.edu", password="admin123")

    me = client.me()
    print("logged in as", me["user"]["username"])
    if me["institution"]:
        institution_id = me["institution"]["id"]
        print(client.get(f"/api/institutions/{institution_id}/stats"))
        print(client.get(f"/api/institutions/{institution_id}/activities", limit=5))


if __name__ == "__main__":
    main()

import csv
import io
import json
import xml.etree.ElementTree as ET

import pytest


def _save(client, **overrides):
    body = {
        "location": "Paris, FR",
        "temperature": 13,
        "condition": "clouds",
        "humidity": 81,
        "windSpeed": 15,
        "visibility": 8,
        "uvIndex": 2,
        "sunrise": "08:34 AM",
        "sunset": "05:00 PM",
        "coordinates": {"lat": 48.85, "lng": 2.35},
    }
    body.update(overrides)
    return client.post("/api/weather/history", json=body)


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "WeatherDesk backend is running"}


def test_save_and_list(client):
    response = _save(client, dateRangeStart="2024-01-01", dateRangeEnd="2024-01-05")

    assert response.status_code == 200
    assert response.json() == {"id": 1, "message": "Weather data saved successfully"}

    listed = client.get("/api/weather/history")
    assert listed.status_code == 200
    (record,) = listed.json()
    assert record["id"] == 1
    assert record["location"] == "Paris, FR"
    assert record["dateRange"] == {"start": "2024-01-01", "end": "2024-01-05"}
    assert record["weatherData"]["windSpeed"] == 15
    assert record["weatherData"]["uvIndex"] == 2
    assert record["weatherData"]["coordinates"] == {"lat": 48.85, "lng": 2.35}
    assert {"dateSearched", "createdAt", "updatedAt"} <= set(record)


def test_absent_sub_objects_are_null(client):
    _save(client, coordinates=None)

    (record,) = client.get("/api/weather/history").json()

    assert record["dateRange"] is None
    assert record["weatherData"]["coordinates"] is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"temperature": 75}, "Temperature must be between -100°C and 60°C"),
        ({"temperature": None}, "Location and temperature are required"),
        ({"location": ""}, "Location and temperature are required"),
        (
            {"dateRangeStart": "2024-02-01", "dateRangeEnd": "2024-01-01"},
            "Start date must be before end date",
        ),
    ],
)
def test_save_validation_errors(client, overrides, message):
    response = _save(client, **overrides)

    assert response.status_code == 400
    assert response.json()["detail"] == message
    assert client.get("/api/weather/history").json() == []


def test_save_rejects_unknown_and_mistyped_fields(client):
    assert _save(client, feelsLike=11).status_code == 400
    assert _save(client, temperature="warm").status_code == 400
    assert client.post(
        "/api/weather/history",
        content=b"{not json",
        headers={"content-type": "application/json"},
    ).status_code == 400


def test_get_single_record(client):
    record_id = _save(client).json()["id"]

    assert client.get(f"/api/weather/history/{record_id}").json()["id"] == record_id
    assert client.get("/api/weather/history/999").status_code == 404


def test_update_ignores_immutable_fields(client):
    record_id = _save(client, dateRangeStart="2024-01-01", dateRangeEnd="2024-01-05").json()["id"]

    response = client.put(
        f"/api/weather/history/{record_id}",
        json={
            "location": "Lyon, FR",
            "temperature": 9,
            "condition": "rain",
            "dateRangeStart": "2030-01-01",
            "dateRangeEnd": "2030-01-02",
            "coordinates": {"lat": 0, "lng": 0},
        },
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Weather data updated successfully"}

    record = client.get(f"/api/weather/history/{record_id}").json()
    assert record["location"] == "Lyon, FR"
    assert record["weatherData"]["temperature"] == 9
    assert record["weatherData"]["condition"] == "rain"
    assert record["weatherData"]["humidity"] == 0
    assert record["dateRange"] == {"start": "2024-01-01", "end": "2024-01-05"}
    assert record["weatherData"]["coordinates"] == {"lat": 48.85, "lng": 2.35}


def test_update_errors(client):
    record_id = _save(client).json()["id"]

    assert client.put(
        f"/api/weather/history/{record_id}", json={"location": "X", "temperature": 100}
    ).status_code == 400
    assert client.put(
        "/api/weather/history/999", json={"location": "X", "temperature": 10}
    ).status_code == 404


def test_delete(client):
    record_id = _save(client).json()["id"]

    response = client.delete(f"/api/weather/history/{record_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Weather data deleted successfully"}

    assert client.delete(f"/api/weather/history/{record_id}").status_code == 404
    assert client.delete("/api/weather/history/abc").status_code == 400


def test_export_formats(client):
    _save(client)
    _save(client, location="Berlin, DE", temperature=-2)

    as_json = client.get("/api/export/json")
    assert as_json.status_code == 200
    assert as_json.headers["content-type"].startswith("application/json")
    assert as_json.headers["content-disposition"] == "attachment; filename=weather-data.json"
    body = json.loads(as_json.content)
    assert body["totalRecords"] == 2
    assert body["data"][0]["location"] == "Berlin, DE"

    as_csv = client.get("/api/export/CSV")
    assert as_csv.status_code == 200
    assert as_csv.headers["content-type"].startswith("text/csv")
    assert as_csv.headers["content-disposition"] == "attachment; filename=weather-data.csv"
    rows = list(csv.reader(io.StringIO(as_csv.text)))
    assert len(rows) == 3
    assert rows[1][1] == "Berlin, DE"

    as_xml = client.get("/api/export/xml")
    assert as_xml.status_code == 200
    assert as_xml.headers["content-type"].startswith("application/xml")
    root = ET.fromstring(as_xml.content)
    assert root.attrib["totalRecords"] == "2"


def test_export_errors(client):
    assert client.get("/api/export/json").status_code == 404
    assert client.get("/api/export/json").json()["detail"] == "No data available for export"

    _save(client)
    response = client.get("/api/export/pdf")
    assert response.status_code == 400
    assert response.json()["detail"] == "Unsupported export format. Use json, csv, or xml."

    assert client.get("/api/export/%20json").status_code == 400

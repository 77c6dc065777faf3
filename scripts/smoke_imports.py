from address_index.pipeline import expand_record


if __name__ == "__main__":
    record = {
        "place_id": 1,
        "osm_type": "W",
        "osm_id": 100,
        "class": "place",
        "type": "houses",
        "centroid": [0.0, 0.0],
        "address": {"street": "Main Street"},
        "interpolation": {
            "startnumber": 10,
            "endnumber": 20,
            "interpolationtype": "even",
            "geometry": [[0.0, 0.0], [10.0, 0.0]],
        },
    }
    documents = expand_record(record)
    print({"documents": len(documents), "housenumbers": [d.housenumber for d in documents]})

"""Built-in announcement presets, in the same shape as the TOML [presets] tables."""

from typing import Any

NEXT_TRAIN_PRESETS: list[dict[str, Any]] = [
    {
        "name": "12:28 | SN Littlehampton to Brighton",
        "state": {
            "chime": "four",
            "platform": "2",
            "hour": "12",
            "min": "28",
            "toc": "southern",
            "terminatingStationCode": "BTN",
            "vias": [],
            "callingAt": ["ANG", "GBS", "DUR", "WWO", "WRH", "SWK", "PLD", "HOV"],
            "coaches": "8 coaches",
        },
    },
    {
        "name": "16:05 | SN Victoria to Portsmouth & Bognor",
        "state": {
            "chime": "four",
            "platform": "12",
            "hour": "16",
            "min": "05",
            "toc": "southern",
            "terminatingStationCode": "PMS",
            "vias": [],
            "callingAt": [
                "CLJ",
                "ECR",
                "GTW",
                "TBD",
                "CRW",
                {
                    "crsCode": "HRH",
                    "splitType": "splits",
                    "splitForm": "rear.4",
                    "splitCallingPoints": ["CHH", "BIG", "PUL", "AMY", "ARU", "FOD", "BAA", "BOG"],
                },
                "BAA",
                "CCH",
                "FSB",
                "BOH",
                "SOB",
                "EMS",
                "HAV",
                "FTN",
            ],
            "coaches": "8 coaches",
        },
    },
    {
        "name": "17:15 | GX Brighton to London Victoria",
        "state": {
            "chime": "four",
            "platform": "5",
            "hour": "17",
            "min": "15",
            "toc": "gatwick express",
            "terminatingStationCode": "VIC",
            "vias": ["GTW"],
            "callingAt": ["PRP", "HSK", "BUG", "HHE", "GTW"],
            "coaches": "8 coaches",
        },
    },
    {
        "name": "11:18 | VT Euston to Edinburgh",
        "state": {
            "chime": "four",
            "platform": "6",
            "hour": "11",
            "min": "18",
            "toc": "virgin pendolino",
            "terminatingStationCode": "EDB",
            "vias": ["BHM"],
            "callingAt": [
                "MKC",
                "RUG",
                "COV",
                "BHI",
                "BHM",
                "SAD",
                "WVH",
                "STA",
                "CRE",
                "WBQ",
                "WGN",
                "PRE",
                "LAN",
                "PNR",
                "CAR",
                {"crsCode": "HYM", "shortPlatform": "front.9"},
            ],
            "coaches": "11 coaches",
        },
    },
    {
        "name": "08:20 | XC Aberdeen to Penzance",
        "state": {
            "chime": "four",
            "platform": "3",
            "hour": "08",
            "min": "20",
            "toc": "crosscountry",
            "terminatingStationCode": "PNZ",
            "vias": ["LDS"],
            "callingAt": [
                "STN",
                "MTS",
                "ARB",
                "DEE",
                "LEU",
                "CUP",
                "LDY",
                "MNC",
                "KDY",
                "INK",
                "HYM",
                "EDB",
                "BWK",
                "ALM",
                "NCL",
                "DHM",
                "DAR",
                "YRK",
                "LDS",
                "WKF",
                "SHF",
                "DBY",
                "BUT",
                "BHM",
                "CNM",
                "BPW",
                "BRI",
                "TAU",
                "TVP",
                "EXD",
                "NTA",
                "TOT",
                "PLY",
                "LSK",
                "BOD",
                "SAU",
                "TRU",
                "RED",
                "SER",
            ],
            "coaches": "5 coaches",
        },
    },
    {
        "name": "08:20 | 1O23 XC Manchester to Brighton (2008)",
        "state": {
            "chime": "four",
            "platform": "3",
            "hour": "08",
            "min": "20",
            "toc": "crosscountry",
            "terminatingStationCode": "BTN",
            "vias": ["BHM", "KPA"],
            "callingAt": [
                "SPT",
                "MAC",
                "CNG",
                "SOT",
                "WVH",
                "BHM",
                "LMS",
                "BAN",
                "OXF",
                "RDG",
                "KPA",
                "ECR",
                "GTW",
                "HHE",
            ],
            "coaches": "5 coaches",
        },
    },
    {
        "name": "18:07 | Chiltern MYB - Stourbridge",
        "state": {
            "chime": "four",
            "platform": "2",
            "hour": "18",
            "min": "07",
            "toc": "chiltern railways",
            "terminatingStationCode": "SBJ",
            "vias": [],
            "callingAt": [
                "HDM",
                "BCS",
                "BAN",
                "LMS",
                "WRW",
                "WRP",
                "DDG",
                "SOL",
                "BMO",
                "BSW",
                "ROW",
            ],
            "coaches": "5 coaches",
        },
    },
    {
        "name": "12:50 | SN Eastbourne - Ashford",
        "state": {
            "chime": "four",
            "platform": "2",
            "hour": "12",
            "min": "50",
            "toc": "southern",
            "terminatingStationCode": "AFK",
            "vias": [],
            "callingAt": [
                "HMD",
                "COB",
                "PEV",
                "CLL",
                "BEX",
                "SLQ",
                "HGS",
                "ORE",
                {"crsCode": "TOK", "shortPlatform": "front.1"},
                "WSE",
                "RYE",
                {"crsCode": "APD", "shortPlatform": "front.2"},
                "HMT",
            ],
            "coaches": "3 coaches",
        },
    },
]

DISRUPTED_TRAIN_PRESETS: list[dict[str, Any]] = [
    {
        "name": "07:33 | SN Brighton - delayed 10 minutes",
        "state": {
            "chime": "four",
            "platform": "1",
            "hour": "07",
            "min": "33",
            "toc": "southern",
            "terminatingStationCode": "BTN",
            "vias": [],
            "disruptionType": "delayedBy",
            "delayTime": "10",
            "disruptionReason": "a failure of signalling equipment",
        },
    },
]

#!/usr/bin/env python3

from __future__ import annotations

import json
import socket
from datetime import datetime

from gitmeta.models.snapshot import MetadataSnapshot


class Metadata:
    @staticmethod
    def generate(snapshot: MetadataSnapshot, output_path: str) -> None:
        with open(output_path, "w", encoding="utf-8") as f:
            data = {
                **snapshot.model_dump(),
                "hostname": socket.gethostname(),
                "created_at": datetime.now().isoformat(),
            }
            json.dump(data, f, ensure_ascii=False, indent=2)

import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_error=None):
        self._payload = payload
        self.status_code = status_code
        self._body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(
                f"{self.status_code} Error", response=self
            )

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


def solar_payload(roof_area_m2, estimated_kw):
    return {"solar": {"roofAreaMeters2": roof_area_m2, "estimatedKw": estimated_kw}}

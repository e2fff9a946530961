"""
HTTP smoke checks for a running shop server.

Drives the public endpoints over the network and reports one line per
check. Usage: shop-smoke [base_url]
"""

import sys
from typing import Callable, Dict, List, Tuple

import requests

from .config import base_url as default_base_url

VALID_PAYMENT = {
    "id": "1",
    "amount": 100.00,
    "cardNumber": "1234567812345678",
    "cardExpiry": "01/23",
    "cardCvv": "123",
}

EXPECTED_PRODUCTS = [
    {"id": "1", "name": "Product 1", "price": 10},
    {"id": "2", "name": "Product 2", "price": 20},
    {"id": "3", "name": "Product 3", "price": 30},
]


class ShopSmokeTester:
    def __init__(self, base_url: str = "http://localhost:8080", timeout: float = 5):
        self.base_url = base_url.rstrip('/')
        self.api_base = f"{self.base_url}/api"
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        kwargs.setdefault('timeout', self.timeout)
        return self.session.request(method, f"{self.base_url}{path}", **kwargs)

    def check_products(self) -> bool:
        """GET /api/products returns the same three products every time."""
        for _ in range(2):
            response = self._request('GET', '/api/products')
            if response.status_code != 200 or response.json() != EXPECTED_PRODUCTS:
                return False
        return True

    def check_products_rejects_post(self) -> bool:
        return self._request('POST', '/api/products').status_code == 405

    def check_payment_echo(self) -> bool:
        """A valid payment is echoed with amount 100.00 rendered as 100."""
        response = self._request('POST', '/api/payments', json=VALID_PAYMENT)
        if response.status_code != 200:
            return False
        return '"amount":100,' in response.text and response.json() == VALID_PAYMENT

    def check_payment_empty_id(self) -> bool:
        payment = dict(VALID_PAYMENT, id="")
        response = self._request('POST', '/api/payments', json=payment)
        return response.status_code == 200 and response.json()['id'] == ""

    def check_payments_rejects_get(self) -> bool:
        return self._request('GET', '/api/payments').status_code == 405

    def check_payment_empty_body(self) -> bool:
        return self._request('POST', '/api/payments', data=b'').status_code == 400

    def check_payment_invalid_body(self) -> bool:
        return self._request('POST', '/api/payments', data=b'invalid').status_code == 400

    def check_payment_string_amount(self) -> bool:
        payment = dict(VALID_PAYMENT, amount="invalid")
        return self._request('POST', '/api/payments', json=payment).status_code == 400

    def check_unknown_path(self) -> bool:
        return self._request('GET', '/invalid').status_code == 404

    def checks(self) -> List[Tuple[str, Callable[[], bool]]]:
        return [
            ("products listing", self.check_products),
            ("products rejects POST", self.check_products_rejects_post),
            ("payment echo", self.check_payment_echo),
            ("payment with empty id", self.check_payment_empty_id),
            ("payments rejects GET", self.check_payments_rejects_get),
            ("payment empty body", self.check_payment_empty_body),
            ("payment invalid body", self.check_payment_invalid_body),
            ("payment string amount", self.check_payment_string_amount),
            ("unknown path", self.check_unknown_path),
        ]

    def run(self) -> Dict[str, bool]:
        results = {}
        for name, check in self.checks():
            try:
                passed = check()
            except (requests.exceptions.RequestException, ValueError) as e:
                print(f"❌ {name}: {e}")
                results[name] = False
                continue
            print(f"{'✅' if passed else '❌'} {name}")
            results[name] = passed
        return results


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    target = argv[0] if argv else default_base_url()

    print(f"🔧 Shop server smoke checks against {target}")
    print("=" * 50)

    results = ShopSmokeTester(target).run()
    failed = [name for name, passed in results.items() if not passed]

    print(f"\n📊 {len(results) - len(failed)}/{len(results)} checks passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Application Sketches Demo - Payment Gateway and Document Editor

Run: python examples/application_demo.py
"""

import random
import tempfile

from lld_app.config.loader import ConfigLoader
from lld_app.document import Document, DocumentEditor, create_storage
from lld_app.errors import PaymentFailedError
from lld_app.logging import configure_logging
from lld_app.payment import PaymentRequest, PaymentService, RazorpayGateway


def demo_payments() -> None:
    print("\n💸 PAYMENT GATEWAY")
    print("-" * 40)

    # No need to wait between retries in a demo
    params = ConfigLoader.create().load({"payment": {"retry_delay_seconds": 0.0}}).payment
    service = PaymentService(params)

    request = PaymentRequest(sender="Aditya", receiver="Shubham", amount=1000.0)
    result = service.pay("paytm", request)
    print(f"  {result.message} (attempts: {result.attempt_count})")

    # A gateway that always drops confirmations
    service.register_gateway(RazorpayGateway(params, failure_rate=1.0, rng=random.Random(7)))
    try:
        service.pay("razorpay", PaymentRequest("Ajay", "Rohan", 500.0))
    except PaymentFailedError as e:
        print(f"  {e}")


def demo_editor() -> None:
    print("\n📝 DOCUMENT EDITOR")
    print("-" * 40)

    editor_params = ConfigLoader.create().load().editor

    with tempfile.TemporaryDirectory() as tmp:
        editor = DocumentEditor(Document("welcome"), create_storage("file", editor_params, base_dir=tmp))
        (editor.add_text("Hello, world!")
               .add_new_line()
               .add_text("This is a real-world document editor example.")
               .add_new_line()
               .add_tab_space()
               .add_text("Indented text after a tab space.")
               .add_new_line()
               .add_image("picture.jpg"))

        print(editor.render_document())
        print(f"\n  Saved to file: {editor.save_document()}")

        editor.storage = create_storage("db", editor_params, base_dir=tmp)
        print(f"  Saved to database: {editor.save_document()}")


def main() -> None:
    configure_logging(level="WARNING")

    print("🎯 APPLICATION SKETCHES DEMO")
    print("=" * 40)

    demo_payments()
    demo_editor()


if __name__ == "__main__":
    main()

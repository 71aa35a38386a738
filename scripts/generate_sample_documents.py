#!/usr/bin/env python3
"""Generate sample contracts and powers of attorney.

Drives the wizard service end to end with synthetic input: every record
goes through step validation, storage and the progress state machine
before its documents are composed.

Usage:
    python scripts/generate_sample_documents.py
    python scripts/generate_sample_documents.py --count 25 --seed 7
    python scripts/generate_sample_documents.py --storage json --output-dir local
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from contract_gen.config import ContractGenConfig, StorageConfig
from contract_gen.exceptions import ContractGenError
from contract_gen.generators import (
    CustomerInputGenerator,
    FinancialInputGenerator,
    LocationInputGenerator,
    PowerOfAttorneyInputGenerator,
    TechnicalInputGenerator,
)
from contract_gen.logging import setup_logging
from contract_gen.service import WizardService
from contract_gen.sinks import JsonFileSink, PdfFileSink
from contract_gen.store import Identity, StaticAuthProvider, create_storage

logger = logging.getLogger(__name__)


def generate_record(
    service: WizardService,
    customers: CustomerInputGenerator,
    locations: LocationInputGenerator,
    technical: TechnicalInputGenerator,
    financial: FinancialInputGenerator,
) -> None:
    """Walk one new contract flow through every data step."""
    service.start_new()
    service.save_customer_info(customers.generate())
    service.save_installation_location(locations.generate())
    state = service.save_technical_config(technical.generate())
    kwp = state.data.technical_config.system_power_kwp if state else None
    service.save_financial_terms(financial.generate(kwp))


def main() -> int:
    """Generate sample documents."""
    parser = argparse.ArgumentParser(description="Generate sample contract PDFs")
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Number of contracts to generate (default: 5)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for PDFs and JSON exports (default: CONTRACT_GEN_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED or random)",
    )
    parser.add_argument(
        "--storage",
        choices=["memory", "json"],
        default=None,
        help="Storage backend (default: CONTRACT_GEN_STORAGE)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format",
    )
    args = parser.parse_args()

    config = ContractGenConfig.from_env()
    setup_logging(config.log_level, args.log_format)

    seed = args.seed if args.seed is not None else config.seed
    output_dir = args.output_dir or config.output.pdf_output_dir
    if args.storage:
        config.storage = StorageConfig(backend=args.storage, data_dir=config.storage.data_dir)

    service = WizardService(
        storage=create_storage(config.storage),
        auth=StaticAuthProvider(Identity(user_id="sample-generator")),
        company=config.company,
        layout=config.layout,
    )
    customers = CustomerInputGenerator(seed=seed)
    locations = LocationInputGenerator(seed=seed)
    technical = TechnicalInputGenerator(seed=seed)
    financial = FinancialInputGenerator(seed=seed)
    grantors = PowerOfAttorneyInputGenerator(seed=seed)

    pdf_sink = PdfFileSink(output_dir)
    json_sink = JsonFileSink(output_dir, pretty=True)

    print("=" * 60)
    print(f"Generating {args.count} sample contract(s)")
    print("=" * 60)

    aggregates = []
    failures = 0
    for index in range(args.count):
        try:
            generate_record(service, customers, locations, technical, financial)
            pdf_sink.write(service.generate_contract())
            pdf_sink.write(service.generate_power_of_attorney())
            aggregates.append(service.state.data)
        except ContractGenError as exc:
            failures += 1
            logger.error("Record %d failed: %s", index + 1, exc)

    pdf_sink.write(service.save_power_of_attorney(grantors.generate()))

    json_sink.write_batch("aggregates", aggregates)
    pdf_sink.close()
    json_sink.close()

    print(f"{'Contracts:':18}{len(aggregates)}")
    print(f"{'PDF files:':18}{len(pdf_sink.written)}")
    print(f"{'Failures:':18}{failures}")
    print(f"\nAll files saved to: {output_dir}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

"""Generate synthetic seller, product and sales source files.

Produces a consistent data set in the layout the batch reads: every sales
file names a seller from the seller file and only references products from
the product file. Pass a seed for reproducible output.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from rich.console import Console
from rich.logging import RichHandler

from salesbatch.config import PipelineConfig, get_env_config, load_pipeline_config
from salesbatch.utils.types import DocumentType

logger = logging.getLogger(__name__)
console = Console()

FIRST_NAMES = [
    "Juan", "María", "Carlos", "Ana", "Luis", "Carmen", "Pedro", "Laura",
    "Miguel", "Sofia", "Diego", "Valentina", "Andrés", "Camila", "Felipe",
    "Isabella", "Santiago", "Natalia", "Sebastián", "Alejandra", "Daniel",
    "Gabriela", "Ricardo", "Paola", "Fernando", "Andrea", "Jorge", "Daniela",
    "Alejandro", "Juliana", "Esteban", "Carolina", "Mauricio", "Catalina",
]

LAST_NAMES = [
    "García", "Rodríguez", "López", "Martínez", "González", "Pérez", "Sánchez",
    "Ramírez", "Cruz", "Flores", "Gómez", "Díaz", "Reyes", "Morales", "Jiménez",
    "Herrera", "Medina", "Castro", "Vargas", "Ortiz", "Rubio", "Marín", "Castillo",
    "Iglesias", "Ruiz", "Torres", "Alvarez", "Gil", "Mendoza", "Vega", "Silva",
    "Guerrero", "Muñoz", "Rojas", "Delgado", "Aguilar", "Moreno",
]

PRODUCT_CATALOGUE = [
    "Laptop Dell Inspiron", "Mouse Inalámbrico Logitech", "Teclado Mecánico Gaming",
    "Monitor LED 24 Pulgadas", "Auriculares Bluetooth Sony", "Webcam HD 1080p",
    "Disco Duro Externo 1TB", "Memoria USB 32GB", "Tablet Samsung Galaxy",
    "Smartphone iPhone 13", "Cargador Universal USB-C", "Cable HDMI 2.0",
    "Impresora Multifuncional HP", "Router WiFi Dual Band", "Parlantes Bluetooth JBL",
    "Micrófono Condensador", "Silla Ergonómica Oficina", "Escritorio Ajustable",
    "Lámpara LED Escritorio", "Organizador Escritorio", "Mousepad Gaming XL",
    "Soporte Monitor Ajustable", "Hub USB 3.0", "Adaptador Ethernet USB",
    "Protector Pantalla Laptop", "Funda Laptop 15 Pulgadas", "Base Refrigerante",
    "Kit Limpiador Pantallas", "Batería Externa 10000mAh", "Adaptador HDMI VGA",
]

# Inclusive document number range per document type
DOCUMENT_RANGES = {
    DocumentType.NATIONAL_ID: (10_000_000, 99_999_999),
    DocumentType.FOREIGN_ID: (1_000_000, 9_999_999),
    DocumentType.MINOR_ID: (1_000_000_000, 1_999_999_999),
}

MIN_PRICE = 15_000
MAX_PRICE = 3_500_000
SALES_LINES = (10, 29)
PRODUCTS_PER_LINE = (1, 6)
QUANTITY = (1, 25)


def document_type_for(number: int) -> DocumentType:
    """Infer the document type from the range a number falls in."""
    if number >= 1_000_000_000:
        return DocumentType.MINOR_ID
    if number >= 10_000_000:
        return DocumentType.NATIONAL_ID
    return DocumentType.FOREIGN_ID


@dataclass
class SalesDataGenerator:
    """Writes a coherent set of source files using one random generator."""

    seed: int | None = None
    delimiter: str = ";"
    document_numbers: list[int] = field(default_factory=list)
    product_ids: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    def between(self, low: int, high: int) -> int:
        return int(self.rng.integers(low, high, endpoint=True))

    def _pick(self, items: list[str]) -> str:
        return items[int(self.rng.integers(len(items)))]

    def _first_names(self) -> str:
        first = self._pick(FIRST_NAMES)
        if self.rng.random() < 0.3:
            second = self._pick([n for n in FIRST_NAMES if n != first])
            return f"{first} {second}"
        return first

    def _last_names(self) -> str:
        first, second = self.rng.choice(LAST_NAMES, size=2, replace=False)
        return f"{first} {second}"

    def create_sellers_file(self, count: int, path: Path) -> Path:
        if count <= 0:
            raise ValueError("Seller count must be positive")

        used: set[int] = set()
        rows = []
        for _ in range(count):
            doc_type = DocumentType(self._pick([t.value for t in DocumentType]))
            low, high = DOCUMENT_RANGES[doc_type]
            number = self.between(low, high)
            while number in used:
                number = self.between(low, high)
            used.add(number)
            self.document_numbers.append(number)
            rows.append(self.delimiter.join(
                [doc_type.value, str(number), self._first_names(), self._last_names()]
            ))

        _write_lines(path, rows)
        return path

    def create_products_file(self, count: int, path: Path) -> Path:
        if count <= 0:
            raise ValueError("Product count must be positive")
        if count > len(PRODUCT_CATALOGUE):
            raise ValueError(f"At most {len(PRODUCT_CATALOGUE)} products are available")

        ids = self.rng.choice(1000, size=count, replace=False)
        names = self.rng.choice(PRODUCT_CATALOGUE, size=count, replace=False)
        rows = []
        for raw_id, name in zip(ids, names):
            product_id = f"PROD{int(raw_id):03d}"
            price = int(round(float(self.rng.uniform(MIN_PRICE, MAX_PRICE)) / 1000)) * 1000
            self.product_ids.append(product_id)
            rows.append(self.delimiter.join([product_id, str(name), str(price)]))

        _write_lines(path, rows)
        return path

    def create_sales_file(self, sales_count: int, document_number: int, path: Path) -> Path:
        if sales_count <= 0:
            raise ValueError("Sales count must be positive")
        if not self.product_ids:
            raise RuntimeError("Generate the product file before sales files")

        rows = [f"{document_type_for(document_number).value}{self.delimiter}{document_number}"]
        for _ in range(sales_count):
            width = min(self.between(*PRODUCTS_PER_LINE), len(self.product_ids))
            chosen = self.rng.choice(self.product_ids, size=width, replace=False)
            pairs = [f"{pid}{self.delimiter}{self.between(*QUANTITY)}" for pid in chosen]
            rows.append(self.delimiter.join(pairs))

        _write_lines(path, rows)
        return path


def _write_lines(path: Path, rows: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    logger.info(f"Wrote {len(rows)} lines to {path}")


def generate_dataset(
    config: PipelineConfig,
    sellers: int = 15,
    products: int = 25,
    seed: int | None = None,
) -> dict[str, int]:
    """Write seller, product and per-seller sales files for a configuration."""
    generator = SalesDataGenerator(seed=seed, delimiter=config.delimiter)
    sources = config.sources

    generator.create_sellers_file(sellers, sources.sellers_file)
    generator.create_products_file(products, sources.products_file)

    total_sales = 0
    for number in generator.document_numbers:
        count = generator.between(*SALES_LINES)
        generator.create_sales_file(count, number, sources.sales_dir / f"vendedor_{number}.txt")
        total_sales += count

    return {"sellers": sellers, "products": products, "sales": total_sales}


def main():
    parser = argparse.ArgumentParser(description="Generate synthetic sales source files")
    parser.add_argument("--env", type=str, default="production", help="Configuration environment")
    parser.add_argument("--base-dir", type=str, help="Data root, overrides the environment default")
    parser.add_argument("--sellers", type=int, default=15)
    parser.add_argument("--products", type=int, default=25)
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[RichHandler(console=Console(stderr=True))])

    try:
        config = load_pipeline_config(args.env, args.base_dir, get_env_config())
        stats = generate_dataset(config, args.sellers, args.products, args.seed)
    except (ValueError, OSError) as exc:
        console.print(f"[red]Generation failed: {exc}[/red]")
        sys.exit(1)

    console.print(
        f"[bold green]Generated {stats['sellers']} sellers, {stats['products']} products, "
        f"{stats['sales']} sales lines[/bold green]"
    )


if __name__ == "__main__":
    main()

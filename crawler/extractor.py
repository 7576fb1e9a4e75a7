import csv
import logging
import re
import sqlite3
from dataclasses import asdict, fields

import pdfplumber
from tqdm import tqdm

from .models import Employee

logger = logging.getLogger("PayrollExtractor")
logger.setLevel(logging.ERROR)
logger.propagate = False
handler = logging.StreamHandler()
handler.setFormatter(
    logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
)
logger.addHandler(handler)

# 1.234,56 / R$ 1.234,56 / -12,00
_BRL_AMOUNT = re.compile(r"^-?(R\$\s*)?-?\d{1,3}(\.\d{3})*,\d{2}$")
_EMPLOYEE_FIELDS = [f.name for f in fields(Employee)]


class PayrollExtractor:
    def extract_data(self, pdf_path):
        logger.info(f"Extracting data from PDF {pdf_path}")
        with pdfplumber.open(pdf_path) as pdf:
            for page in pdf.pages:
                logger.info(f"Processing page {page.page_number}")
                for j, table in enumerate(page.extract_tables()):
                    logger.info(f"Processing table {j}")
                    yield from (
                        [cell.strip() if cell else "" for cell in row] for row in table
                    )
        logger.info(f"Data extracted from PDF {pdf_path}")

    def _is_amount(self, cell):
        return bool(_BRL_AMOUNT.match(cell))

    def _brl_to_float(self, amount):
        negative = "-" in amount
        digits = amount.replace("R$", "").replace("-", "").strip()
        value = float(digits.replace(".", "").replace(",", "."))
        return -value if negative else value

    def parse_employee(self, row):
        # name first, wage/perks/others/total last; anything else is not an employee
        if len(row) < 5 or not row[0] or self._is_amount(row[0]):
            return None
        if row[0].lower().startswith("total"):
            return None
        amounts = row[-4:]
        if not all(self._is_amount(cell) for cell in amounts):
            return None
        wage, perks, others, total = (self._brl_to_float(cell) for cell in amounts)
        return Employee(name=row[0], wage=wage, perks=perks, others=others, total=total)

    def extract_employees(self, pdf_path):
        employees = []
        for row in tqdm(self.extract_data(pdf_path=pdf_path), desc="Extracting employees"):
            employee = self.parse_employee(row)
            if employee is None:
                logger.info({"SKIPPED_ROW": row})
                continue
            employees.append(employee)
        return employees

    def save_to_csv_file(self, employees, csv_output):
        logger.info(f"Saving data to CSV file {csv_output}")
        with open(csv_output, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=_EMPLOYEE_FIELDS)
            writer.writeheader()
            writer.writerows(asdict(e) for e in employees)

    def save_to_sqlite(self, employees, db_name, table_name="employees"):
        logger.info(f"Saving data to SQLite database {db_name}")
        conn = sqlite3.connect(db_name)
        try:
            conn.execute(
                f"CREATE TABLE IF NOT EXISTS {table_name} "
                "(name TEXT, wage REAL, perks REAL, others REAL, total REAL)"
            )
            conn.executemany(
                f"INSERT INTO {table_name} VALUES (?, ?, ?, ?, ?)",
                [(e.name, e.wage, e.perks, e.others, e.total) for e in employees],
            )
            conn.commit()
        finally:
            conn.close()

    def extract_and_save(self, pdf_path, csv_output=None, sqlite_output=None):
        if not csv_output and not sqlite_output:
            raise ValueError("At least one output should be provided")
        if csv_output and sqlite_output:
            raise ValueError("Only one output should be provided")

        employees = self.extract_employees(pdf_path)
        if csv_output:
            self.save_to_csv_file(employees, csv_output)
        else:
            self.save_to_sqlite(employees, sqlite_output)
        logger.info(f"{len(employees)} employees extracted from {pdf_path}")
        return employees

"""
Validation Reporting Module.

This module provides reporting functionality for tag validation results:
console summaries, JSON, Excel and CSV reports.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..models import FileValidationResult, MessageLevel, MessageType
from ..utils.location_resolver import LocationResolver

class ValidationReporter:
    """
    Reporting for tag validation results.

    This reporter generates reports in multiple formats (JSON, Excel, CSV)
    for the results of a directory validation.
    """

    FORMATS = ('json', 'excel', 'csv')

    SUMMARY_HEADERS = [
        'File Name', 'File Path', 'Passed', 'Readable',
        'Errors', 'Warnings', 'Hints',
        'Tag Mismatch', 'Void End Tag', 'Redundant Self Close',
        'Missing End Tag', 'Unterminated Comment', 'Unopened Comment'
    ]

    def save_detailed_report(self, results: List[FileValidationResult], output_dir: str = "results",
                             formats: tuple = ('json', 'excel')) -> List[Path]:
        """
        Save reports in the requested formats.

        JSON is saved under a 'json' subfolder of output_dir, Excel and CSV
        directly under output_dir.

        Args:
            results: List of FileValidationResult objects
            output_dir: Output directory for reports (default: "results")
            formats: Any of 'json', 'excel', 'csv'

        Returns:
            Paths of the written reports
        """
        unknown = set(formats) - set(self.FORMATS)
        if unknown:
            raise ValueError(f"Unknown report formats: {sorted(unknown)}")

        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        written = []
        if 'json' in formats:
            json_dir = output_path / "json"
            json_dir.mkdir(exist_ok=True)
            written.append(self.save_json_report(results, json_dir / "tag_validation_report.json"))
        if 'excel' in formats:
            written.append(self.save_excel_summary(results, output_path / "tag_validation_report.xlsx"))
        if 'csv' in formats:
            written.append(self.save_csv_summary(results, output_path / "tag_validation_report.csv"))
        return written

    def save_json_report(self, results: List[FileValidationResult], file_path: Path) -> Path:
        """
        Save detailed JSON report.

        Args:
            results: List of FileValidationResult objects
            file_path: Path to output JSON file

        Returns:
            Path to the written file
        """
        report_data = {
            "report_type": "tag_validation",
            "total_files": len(results),
            "summary": self._generate_summary(results),
            "files": []
        }

        for result in results:
            file_data = {
                "file_name": result.metrics.get('file_name', Path(result.file_path).name),
                "file_path": result.file_path,
                "passed": result.passed,
                "readable": result.readable,
                "read_error": result.error,
                "level_counts": result.count_by_level(),
                "message_breakdown": result.metrics.get('message_breakdown', {}),
                "messages": [{
                        "level": message.level.value,
                        "type": message.message_type.value,
                        "line": message.primary_tag.position.line,
                        "column": message.primary_tag.position.column,
                        "location": LocationResolver.format_location(message.primary_tag.position),
                        "tag": message.primary_tag.raw,
                        "other_tag": message.secondary_tag.raw if message.secondary_tag else None,
                        "message": message.message
                    } for message in result.messages]
            }

            report_data["files"].append(file_data)

        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(report_data, f, indent=2, ensure_ascii=False)
        return file_path

    def save_excel_summary(self, results: List[FileValidationResult], file_path: Path) -> Path:
        """
        Save Excel workbook.

        Args:
            results: List of FileValidationResult objects
            file_path: Path to output Excel file

        Returns:
            Path to the written file
        """
        wb = Workbook()

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")

        # Sheet 1: Summary statistics
        ws_summary = wb.active
        ws_summary.title = "Summary"

        summary = self._generate_summary(results)

        ws_summary['A1'] = "Metric"
        ws_summary['B1'] = "Value"
        for cell in (ws_summary['A1'], ws_summary['B1']):
            cell.font = header_font
            cell.fill = header_fill
        ws_summary['B1'].alignment = Alignment(horizontal="right", vertical="center")

        summary_data = [
            ("Total Files", summary.get('total_files', 0)),
            ("Passed Files", summary.get('passed_files', 0)),
            ("Pass Rate (%)", f"{summary.get('pass_rate', 0):.2f}"),
            ("Total Errors", summary.get('total_errors', 0)),
            ("Total Warnings", summary.get('total_warnings', 0)),
            ("Unreadable Files", summary.get('unreadable_files', 0)),
        ]

        for row_idx, (metric, value) in enumerate(summary_data, 2):
            ws_summary[f'A{row_idx}'] = metric
            ws_summary[f'B{row_idx}'] = value
            ws_summary[f'B{row_idx}'].alignment = Alignment(horizontal="right", vertical="center")

        ws_summary.column_dimensions['A'].width = 25
        ws_summary.column_dimensions['B'].width = 20

        # Sheet 2: Detailed results
        ws = wb.create_sheet(title="Detailed Results")
        self._write_headers(ws, self.SUMMARY_HEADERS, header_font, header_fill, header_alignment)

        for row_idx, result in enumerate(results, 2):
            for col, value in enumerate(self._summary_row(result), 1):
                ws.cell(row=row_idx, column=col, value=value)

        for column in ws.columns:
            max_length = max(len(str(cell.value)) for cell in column if cell.value is not None)
            ws.column_dimensions[get_column_letter(column[0].column)].width = min(max_length + 2, 50)

        green_fill = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")
        red_fill = PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid")
        yellow_fill = PatternFill(start_color="FFF2CC", end_color="FFF2CC", fill_type="solid")

        for row_idx in range(2, len(results) + 2):
            # Passed column (column C)
            cell = ws.cell(row=row_idx, column=3)
            cell.fill = green_fill if cell.value else red_fill

            # Warnings column (column F)
            cell = ws.cell(row=row_idx, column=6)
            if isinstance(cell.value, int) and cell.value > 0:
                cell.fill = yellow_fill

        # Sheet 3: Message details (only for files with messages)
        files_with_messages = [r for r in results if r.messages]

        if files_with_messages:
            ws_messages = wb.create_sheet(title="Message Details")
            self._write_headers(ws_messages, ['File Name', 'Message #', 'Level', 'Type', 'Line', 'Column', 'Message'],
                                header_font, header_fill, header_alignment)

            message_row = 2
            for result in files_with_messages:
                file_name = result.metrics.get('file_name', Path(result.file_path).name)
                for i, message in enumerate(result.messages, 1):
                    ws_messages.cell(row=message_row, column=1, value=file_name if i == 1 else "")
                    ws_messages.cell(row=message_row, column=2, value=i)
                    ws_messages.cell(row=message_row, column=3, value=message.level.value)
                    ws_messages.cell(row=message_row, column=4, value=message.message_type.value)
                    ws_messages.cell(row=message_row, column=5, value=message.primary_tag.position.line)
                    ws_messages.cell(row=message_row, column=6, value=message.primary_tag.position.column)
                    ws_messages.cell(row=message_row, column=7, value=message.message)
                    message_row += 1

            ws_messages.column_dimensions['A'].width = 25  # File Name
            ws_messages.column_dimensions['B'].width = 10  # Message #
            ws_messages.column_dimensions['C'].width = 10  # Level
            ws_messages.column_dimensions['D'].width = 22  # Type
            ws_messages.column_dimensions['E'].width = 8   # Line
            ws_messages.column_dimensions['F'].width = 8   # Column
            ws_messages.column_dimensions['G'].width = 80  # Message

        # Sheet 4: Files that could not be read
        unreadable = [r for r in results if not r.readable]

        if unreadable:
            ws_unreadable = wb.create_sheet(title="Unreadable Files")
            self._write_headers(ws_unreadable, ['File Name', 'Error Type', 'Message'],
                                header_font, header_fill, header_alignment)

            for row_idx, result in enumerate(unreadable, 2):
                ws_unreadable.cell(row=row_idx, column=1, value=result.metrics.get('file_name', ''))
                ws_unreadable.cell(row=row_idx, column=2, value=result.metrics.get('error_type', ''))
                ws_unreadable.cell(row=row_idx, column=3, value=result.error)

            ws_unreadable.column_dimensions['A'].width = 25
            ws_unreadable.column_dimensions['B'].width = 20
            ws_unreadable.column_dimensions['C'].width = 80

        wb.save(file_path)
        return file_path

    def save_csv_summary(self, results: List[FileValidationResult], file_path: Path) -> Path:
        """
        Save CSV summary, one row per file.

        Args:
            results: List of FileValidationResult objects
            file_path: Path to output CSV file

        Returns:
            Path to the written file
        """
        with open(file_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(self.SUMMARY_HEADERS)
            for result in results:
                writer.writerow(self._summary_row(result))
        return file_path

    @staticmethod
    def _write_headers(ws, headers: List[str], font: Font, fill: PatternFill, alignment: Alignment):
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = font
            cell.fill = fill
            cell.alignment = alignment

    @staticmethod
    def _summary_row(result: FileValidationResult) -> List[Any]:
        counts = result.count_by_level()
        return [
            result.metrics.get('file_name', Path(result.file_path).name),
            result.file_path,
            result.passed,
            result.readable,
            counts[MessageLevel.ERROR.value],
            counts[MessageLevel.WARNING.value],
            counts[MessageLevel.HINT.value],
        ] + [len(result.get_messages_by_type(message_type)) for message_type in MessageType]

    def _generate_summary(self, results: List[FileValidationResult]) -> Dict[str, Any]:
        """
        Generate summary statistics.

        Args:
            results: List of FileValidationResult objects

        Returns:
            Dictionary containing summary statistics
        """
        if not results:
            return {}

        total_files = len(results)
        passed_files = sum(1 for r in results if r.passed)

        all_messages = []
        for result in results:
            all_messages.extend(result.messages)

        message_breakdown = {}
        for message_type in MessageType:
            count = len([m for m in all_messages if m.message_type == message_type])
            if count > 0:
                message_breakdown[message_type.value] = count

        return {
            "total_files": total_files,
            "passed_files": passed_files,
            "failed_files": total_files - passed_files,
            "pass_rate": passed_files / total_files * 100,
            "total_messages": len(all_messages),
            "total_errors": len([m for m in all_messages if m.level == MessageLevel.ERROR]),
            "total_warnings": len([m for m in all_messages if m.level == MessageLevel.WARNING]),
            "total_hints": len([m for m in all_messages if m.level == MessageLevel.HINT]),
            "unreadable_files": sum(1 for r in results if not r.readable),
            "message_breakdown": message_breakdown
        }

    def generate_batch_summary(self, results: List[FileValidationResult]) -> Dict[str, Any]:
        """
        Generate summary statistics for batch validation results.

        Args:
            results: List of FileValidationResult objects

        Returns:
            Dictionary containing batch summary statistics
        """
        if not results:
            return {"total_files": 0, "message": "No results to summarize"}

        summary = self._generate_summary(results)
        summary["detailed_results"] = [
            {
                "file_name": result.metrics.get('file_name', f"File_{i+1}"),
                "file_path": result.file_path,
                "passed": result.passed,
                "readable": result.readable,
                "message_count": len(result.messages)
            }
            for i, result in enumerate(results)
        ]
        return summary

    def print_messages(self, results: List[FileValidationResult]):
        """
        Print every rendered message and every read failure.

        Args:
            results: List of FileValidationResult objects
        """
        for result in results:
            if not result.readable:
                print(f"{result.file_path} [ERROR] {result.error}")
            for message in result.messages:
                print(message.message)

    def print_batch_summary(self, results: List[FileValidationResult]):
        """
        Print a formatted summary of batch validation results.

        Args:
            results: List of FileValidationResult objects
        """
        summary = self.generate_batch_summary(results)

        print("\n" + "="*60)
        print("TAG VALIDATION SUMMARY")
        print("="*60)
        print(f"Total Files: {summary['total_files']}")
        if not results:
            print("="*60)
            return

        print(f"Passed: {summary['passed_files']} ({summary['pass_rate']:.1f}%)")
        print(f"Failed: {summary['failed_files']}")
        print(f"Errors: {summary['total_errors']} | Warnings: {summary['total_warnings']}")
        if summary['unreadable_files']:
            print(f"Unreadable Files: {summary['unreadable_files']}")

        print("\nFile Details:")
        for detail in summary['detailed_results']:
            if not detail['readable']:
                status = "[ERROR]"
            else:
                status = "[VALID]" if detail['passed'] else "[INVALID]"
            print(f"  {status} {detail['file_name']:<25} Messages: {detail['message_count']}")

        print("="*60)

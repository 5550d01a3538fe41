from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.reporting.contexts import ResourceUsageReportContext


class ResourceUsageExcelRenderer:
    def render(self, ctx: ResourceUsageReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        overload_fill = PatternFill("solid", fgColor="FFCCCC")

        # ---------------- Resource usage ----------------
        ws = wb.active
        ws.title = "Resource Usage"

        ws["A1"] = f"Resource usage - project {ctx.project_id}"
        ws["A1"].font = title_font
        ws["A2"] = f"As of {ctx.as_of.isoformat()}"

        headers = [
            "Resource ID",
            "Name",
            "Capacity (%)",
            "Assigned (%)",
            "Available (%)",
            "Peak load (%)",
            "Status",
            "Workload",
            "Overloaded in time",
        ]
        header_row = 4
        for col_index, h in enumerate(headers, start=1):
            cell = ws.cell(row=header_row, column=col_index, value=h)
            cell.font = header_font
            cell.alignment = center
            cell.fill = header_fill
            cell.border = thin_border

        for row_index, u in enumerate(ctx.usages, start=header_row + 1):
            values = [
                u.resource_id,
                u.resource_name,
                round(u.capacity * 100, 1),
                round(u.assigned_percent * 100, 1),
                round(u.available_percent * 100, 1),
                round(u.peak_units * 100, 1),
                u.status,
                u.workload,
                "Yes" if u.is_overloaded_in_time else "No",
            ]
            for col_index, v in enumerate(values, start=1):
                cell = ws.cell(row=row_index, column=col_index, value=v)
                cell.border = thin_border
                if u.is_overloaded_in_time:
                    cell.fill = overload_fill

        ws.column_dimensions["A"].width = 36
        ws.column_dimensions["B"].width = 28
        for col_letter in ("C", "D", "E", "F", "G", "H", "I"):
            ws.column_dimensions[col_letter].width = 18

        # ---------------- Histogram ----------------
        if ctx.histograms:
            ws_hist = wb.create_sheet("Histogram")
            hist_headers = ["Resource", "Date", "Load (%)", "Capacity (%)", "Overloaded"]
            for c, h in enumerate(hist_headers, start=1):
                cell = ws_hist.cell(1, c, h)
                cell.font = header_font
                cell.fill = header_fill
                cell.alignment = center
                cell.border = thin_border

            r = 2
            for hist in ctx.histograms:
                for day in hist.days:
                    values = [
                        hist.resource_name,
                        day.day.isoformat(),
                        round(day.workload_units * 100, 1),
                        round(day.capacity_units * 100, 1),
                        "Yes" if day.is_overloaded else "No",
                    ]
                    for c, v in enumerate(values, start=1):
                        ws_hist.cell(r, c, v).border = thin_border
                    r += 1

            ws_hist.column_dimensions["A"].width = 28
            for col_letter in ("B", "C", "D", "E"):
                ws_hist.column_dimensions[col_letter].width = 15

        wb.save(output_path)
        return output_path

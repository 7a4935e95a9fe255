"""
Hijri Picker CLI - 단일 진입점
"""
import typer
from interface.cli.commands.month import show_month
from interface.cli.commands.validate_input import validate_input
from interface.cli.commands.range_info import range_info
from interface.cli.commands.page import page_index

app = typer.Typer(help="히즈라력 날짜 피커 엔진 CLI")

app.command("month")(show_month)
app.command("validate")(validate_input)
app.command("range")(range_info)
app.command("page")(page_index)

if __name__ == "__main__":
    app()

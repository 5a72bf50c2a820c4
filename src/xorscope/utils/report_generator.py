"""
Report Generation Module
Creates human-readable Markdown reports from analysis results
"""

from datetime import datetime


class ReportGenerator:
    """
    Generates Markdown reports from Xorscope analysis results

    Sections:
    - Summary
    - Key-length candidate table
    - Recovered keys with plaintext previews
    """

    def __init__(self, preview_length: int = 200):
        """
        Initialize report generator

        Args:
            preview_length: Characters of plaintext shown per candidate
        """
        self.preview_length = preview_length

    def generate_markdown(self, result, title: str = "Analysis") -> str:
        """
        Generate Markdown report

        Args:
            result: AnalysisResult object
            title: Name for the analysis

        Returns:
            Markdown formatted report as string
        """
        sections = [
            self._generate_header(title, result),
            self._generate_summary(result),
            self._generate_key_length_section(result),
            self._generate_candidates_section(result),
            self._generate_footer(),
        ]
        return '\n\n'.join(sections)

    def _generate_header(self, title: str, result) -> str:
        """Generate report header"""
        return f"""# Xorscope Analysis Report: {title}

**Generated**: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}
**Input Encoding**: `{result.scheme}`
**Ciphertext Size**: {result.input_length} bytes"""

    def _generate_summary(self, result) -> str:
        """Generate summary"""
        best = result.best()
        lines = ["## Summary", ""]
        lines.append(f"- **Candidates tried**: {len(result.results)}")
        if best is not None:
            lines.append(f"- **Highest-scoring key length**: {best.key_length}")
            lines.append(f"- **Highest-scoring key**: `{self._printable(best.key)}` (`{best.key.hex()}`)")
        else:
            lines.append("- No candidates produced")
        return '\n'.join(lines)

    def _generate_key_length_section(self, result) -> str:
        """Generate key-length estimate table"""
        lines = ["## Key Length Estimates", ""]
        if not result.candidates:
            lines.append("_Key lengths supplied by caller; no estimate run._")
            return '\n'.join(lines)

        lines.append("| Rank | Length | Normalized Distance |")
        lines.append("|------|--------|---------------------|")
        for rank, candidate in enumerate(result.candidates, 1):
            lines.append(f"| {rank} | {candidate.length} | {candidate.score:.4f} |")
        return '\n'.join(lines)

    def _generate_candidates_section(self, result) -> str:
        """Generate one subsection per recovered key"""
        lines = ["## Recovered Keys"]
        for r in result.results:
            preview = r.plaintext[:self.preview_length]
            if len(r.plaintext) > self.preview_length:
                preview += "..."
            lines.append("")
            lines.append(f"### Key length {r.key_length}")
            lines.append("")
            lines.append(f"- **Key (text)**: `{self._printable(r.key)}`")
            lines.append(f"- **Key (hex)**: `{r.key.hex()}`")
            lines.append(f"- **Plaintext score**: {r.score:.4f}")
            lines.append("")
            lines.append("```")
            lines.append(preview)
            lines.append("```")
        return '\n'.join(lines)

    def _generate_footer(self) -> str:
        """Generate report footer"""
        return "---\n*Report generated by Xorscope. Key-length estimation is heuristic; review every candidate.*"

    @staticmethod
    def _printable(data: bytes) -> str:
        return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)

import os
import sys
import unittest

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.models import reporting, section_analysis
from src.models.section_inputs import default_inputs
from src.models.units import UnitSystem
from src.models.validation import InvalidInput


class TestModularAnalyzer(unittest.TestCase):
    def setUp(self):
        self.inputs = default_inputs(UnitSystem.IMPERIAL)

    def test_analysis(self):
        res = section_analysis.analyze(self.inputs, UnitSystem.IMPERIAL)
        self.assertEqual(res['status'], 'OK')
        self.assertTrue(res['yields'])
        self.assertAlmostEqual(res['Mn_display'], 239.8, places=1)

    def test_report(self):
        bundle = reporting.build_analysis_report(self.inputs, UnitSystem.IMPERIAL)
        self.assertEqual(len(bundle.equations), 8)
        self.assertEqual(bundle.result.As_min, bundle.result.As_min_flat_term)

    def test_unit_switch_logic(self):
        # Case 1: SI preset yields
        si = section_analysis.analyze(default_inputs(UnitSystem.SI), UnitSystem.SI)
        self.assertTrue(si.yields)
        self.assertEqual(si.units.moment_display, "kN-m")

        # Case 2: Heavy reinforcement does not yield
        heavy = section_analysis.analyze(self.inputs.with_changes(num_bars=12), UnitSystem.IMPERIAL)
        self.assertFalse(heavy.yields)

        # Case 3: Zero width is rejected
        with self.assertRaises(InvalidInput):
            section_analysis.analyze(self.inputs.with_changes(b=0.0), UnitSystem.IMPERIAL)

if __name__ == '__main__':
    unittest.main()

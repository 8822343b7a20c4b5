"""ACI 318 coefficients and constants for singly reinforced flexure (Imperial and SI)."""

# Flexure (ACI 318 Section 22.2)
EPSILON_CU = 0.003           # Ultimate concrete strain
WHITNEY_COEFF = 0.85         # Whitney stress block factor: C = 0.85 * fc * b * a

# Minimum flexural reinforcement (ACI 318 Eq 9.6.1.2)
MIN_AS_SQRT_COEFF_PSI = 3.0     # 3 * sqrt(fc) / fy  (psi)
MIN_AS_FLAT_COEFF_PSI = 200.0   # 200 / fy          (psi)
MIN_AS_SQRT_COEFF_MPA = 0.25    # 0.25 * sqrt(fc) / fy  (MPa)
MIN_AS_FLAT_COEFF_MPA = 1.4     # 1.4 / fy             (MPa)

# Beta1 (ACI 318 Table 22.2.2.4.3)
BETA1_HIGH = 0.85
BETA1_LOW = 0.65
BETA1_STEP = 0.05
FC_BETA1_UPPER_PSI = 4000.0      # fc threshold for beta1 = 0.85
FC_BETA1_LOWER_PSI = 8000.0      # fc threshold for beta1 = 0.65
FC_BETA1_STEP_PSI = 1000.0
FC_BETA1_UPPER_MPA = 28.0
FC_BETA1_LOWER_MPA = 55.0
FC_BETA1_STEP_MPA = 7.0

# Display conversions
LB_PER_KIP = 1000.0
N_PER_KN = 1000.0
IN_PER_FT = 12.0
NMM_PER_KNM = 1e6

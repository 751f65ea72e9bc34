"""Application constants."""

# Blood pressure thresholds (mmHg)
BP_NORMAL_SYSTOLIC_MAX = 120  # exclusive
BP_ELEVATED_SYSTOLIC_MAX = 130  # exclusive
BP_STAGE_1_SYSTOLIC_MAX = 140  # exclusive
BP_NORMAL_DIASTOLIC_MAX = 80  # exclusive
BP_STAGE_1_DIASTOLIC_MAX = 90  # exclusive

# Resting heart rate bounds (bpm), both inclusive for Normal
HR_NORMAL_MIN = 60
HR_NORMAL_MAX = 100

# Blocking message shown when an entry cannot be saved
INVALID_WEIGHT_MESSAGE = "Please enter a valid weight"

ENTRY_NOT_FOUND_MESSAGE = "Entry not found"

# Largest vital sign reading stored; anything beyond is treated as a typo
VITAL_MAX = 1000

from typing import Any, Dict, List


def _record(rid, name, age, city, state, school, school_type, school_state, school_city,
            cum, unw, wei, rigor, credits, year, major=None) -> Dict[str, Any]:
    rec: Dict[str, Any] = {
        "id": rid,
        "name": name,
        "age": age,
        "city": city,
        "state": state,
        "schoolName": school,
        "schoolType": school_type,
        "schoolState": school_state,
        "schoolCity": school_city,
        "cumulativeGpa": cum,
        "unweightedGpa": unw,
        "weightedGpa": wei,
        "rigorCoursesCount": rigor,
        "creditsEarned": credits,
        "graduationYear": year,
    }
    if major:
        rec["majorInterest"] = major
    return rec


# Bundled set, always available on the sample channel
SAMPLE_DATA: List[Dict[str, Any]] = [
    _record("s-1", "Ava Thompson", 17, "Austin", "TX", "Westlake High School", "High School", "TX", "Austin",
            3.82, 3.74, 4.21, 7, 24, 2025, "Biology"),
    _record("s-2", "Liam Carter", 18, "Dallas", "TX", "Highland Park High School", "High School", "TX", "Dallas",
            3.41, 3.35, 3.79, 4, 26, 2024, "Economics"),
    _record("s-3", "Sofia Martinez", 20, "Phoenix", "AZ", "Arizona State University", "College", "AZ", "Tempe",
            3.65, 3.65, 3.65, 9, 58, 2026, "Computer Science"),
    _record("s-4", "Noah Kim", 16, "Seattle", "WA", "Garfield High School", "High School", "WA", "Seattle",
            3.95, 3.91, 4.48, 9, 19, 2026, "Mathematics"),
    _record("s-5", "Emma Johnson", 19, "Boston", "MA", "Boston University", "College", "MA", "Boston",
            3.28, 3.28, 3.28, 5, 32, 2027, "Psychology"),
    _record("s-6", "Mason Patel", 17, "Columbus", "OH", "Upper Arlington High School", "High School", "OH", "Columbus",
            2.97, 2.91, 3.22, 2, 22, 2025),
    _record("s-7", "Isabella Nguyen", 21, "San Jose", "CA", "San Jose State University", "College", "CA", "San Jose",
            3.52, 3.52, 3.52, 6, 88, 2025, "Mechanical Engineering"),
    _record("s-8", "Ethan Brooks", 18, "Atlanta", "GA", "Grady High School", "High School", "GA", "Atlanta",
            3.14, 3.02, 3.47, 3, 25, 2024, "History"),
]

# Canned set for the CSV channel ("Tech Pioneers")
DEMO_CSV_DATA: List[Dict[str, Any]] = [
    _record("csv-1", "Grace Hopper", 18, "Arlington", "VA", "Yorktown High School", "High School", "VA", "Arlington",
            3.91, 3.85, 4.35, 8, 27, 2024, "Computer Science"),
    _record("csv-2", "Alan Turing", 20, "Cambridge", "MA", "Massachusetts Institute of Technology", "College", "MA",
            "Cambridge", 3.97, 3.97, 3.97, 12, 64, 2026, "Mathematics"),
    _record("csv-3", "Ada Lovelace", 17, "Princeton", "NJ", "Princeton High School", "High School", "NJ", "Princeton",
            4.0, 3.96, 4.62, 10, 21, 2025, "Mathematics"),
    _record("csv-4", "Dennis Ritchie", 21, "Summit", "NJ", "Rutgers University", "College", "NJ", "New Brunswick",
            3.58, 3.58, 3.58, 7, 92, 2025, "Physics"),
    _record("csv-5", "Margaret Hamilton", 19, "Paoli", "IN", "Earlham College", "College", "IN", "Richmond",
            3.74, 3.74, 3.74, 8, 45, 2027, "Software Engineering"),
]

# Canned set for the remote channel ("Science Leaders")
DEMO_API_DATA: List[Dict[str, Any]] = [
    _record("api-1", "Marie Curie", 19, "Chicago", "IL", "University of Chicago", "College", "IL", "Chicago",
            3.93, 3.93, 3.93, 11, 48, 2027, "Chemistry"),
    _record("api-2", "Rosalind Franklin", 18, "Denver", "CO", "East High School", "High School", "CO", "Denver",
            3.88, 3.8, 4.4, 9, 26, 2024, "Biochemistry"),
    _record("api-3", "Carl Sagan", 20, "Ithaca", "NY", "Cornell University", "College", "NY", "Ithaca",
            3.61, 3.61, 3.61, 8, 70, 2026, "Astronomy"),
    _record("api-4", "Katherine Johnson", 17, "Raleigh", "NC", "Enloe High School", "High School", "NC", "Raleigh",
            3.99, 3.94, 4.57, 10, 20, 2025, "Mathematics"),
    _record("api-5", "Richard Feynman", 21, "Pasadena", "CA", "California Institute of Technology", "College", "CA",
            "Pasadena", 3.47, 3.47, 3.47, 9, 101, 2025, "Physics"),
]

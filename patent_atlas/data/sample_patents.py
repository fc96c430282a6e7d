"""Embedded patent records served when the patent service is unreachable."""

SAMPLE_PATENTS = [
    {
        "patentNo": "TR2023/990011",
        "keywords": "defense, aerospace, propulsion",
        "abstract": "An advanced propulsion system for aerospace applications.",
        "applicationDate": "10.11.2023",
        "publicationDate": "17.05.2024",
        "applicant": "TUSAŞ",
        "ipc": "F02K 9/00",
        "cpc": "F02K 9/00",
        "claims": "1. An aerospace propulsion system...\n2. The propulsion method of claim 1...",
        "geographicRegion": "TURKEY",
        "patentStatus": "active",
        "latitude": 39.9334,
        "longitude": 32.8597
    },
    {
        "patentNo": "US2024/112233",
        "keywords": "artificial intelligence, healthcare, diagnosis",
        "abstract": "An AI-powered diagnostic system for medical imaging analysis.",
        "applicationDate": "15.12.2023",
        "publicationDate": "22.06.2024",
        "applicant": "GE Healthcare",
        "ipc": "G16H 30/40",
        "cpc": "G16H 30/40",
        "claims": "1. A medical imaging analysis system...\n2. The diagnostic method of claim 1...",
        "geographicRegion": "USA",
        "patentStatus": "active",
        "latitude": 41.8781,
        "longitude": -87.6298
    },
    {
        "patentNo": "EP2024/334455",
        "keywords": "renewable energy, solar power, efficiency",
        "abstract": "A high-efficiency solar panel system with advanced tracking.",
        "applicationDate": "20.01.2024",
        "publicationDate": "27.07.2024",
        "applicant": "SMA Solar Technology",
        "ipc": "H02S 20/32",
        "cpc": "H02S 20/32",
        "claims": "1. A solar tracking system...\n2. The efficiency optimization method of claim 1...",
        "geographicRegion": "EU",
        "patentStatus": "active",
        "latitude": 50.1109,
        "longitude": 8.6821
    },
    {
        "patentNo": "CN2024/445566",
        "keywords": "quantum computing, encryption, security",
        "abstract": "A quantum-resistant encryption system for secure communications.",
        "applicationDate": "03.02.2024",
        "publicationDate": "10.08.2024",
        "applicant": "Huawei Technologies",
        "ipc": "H04L 9/08",
        "cpc": "H04L 9/0852",
        "claims": "1. A quantum encryption system...\n2. The security protocol of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 22.5431,
        "longitude": 114.0579
    },
    {
        "patentNo": "JP2024/778899",
        "keywords": "robotics, automation, manufacturing",
        "abstract": "An advanced robotic system for precision manufacturing.",
        "applicationDate": "15.03.2024",
        "publicationDate": "22.09.2024",
        "applicant": "Fanuc Corporation",
        "ipc": "B25J 9/16",
        "cpc": "B25J 9/163",
        "claims": "1. A robotic manufacturing system...\n2. The precision control method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 35.6762,
        "longitude": 139.6503
    },
    {
        "patentNo": "KR2024/990011",
        "keywords": "5G, communication, network",
        "abstract": "A next-generation 5G network optimization system.",
        "applicationDate": "20.04.2024",
        "publicationDate": "27.10.2024",
        "applicant": "Samsung Electronics",
        "ipc": "H04W 24/02",
        "cpc": "H04W 24/02",
        "claims": "1. A 5G network optimization system...\n2. The performance enhancement method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 37.5665,
        "longitude": 126.9780
    },
    {
        "patentNo": "TR2024/112233",
        "keywords": "medical device, imaging, diagnostic",
        "abstract": "A portable medical imaging device for emergency diagnostics.",
        "applicationDate": "10.05.2024",
        "publicationDate": "17.11.2024",
        "applicant": "TÜBİTAK",
        "ipc": "A61B 5/00",
        "cpc": "A61B 5/0059",
        "claims": "1. A portable medical imaging device...\n2. The diagnostic method of claim 1...",
        "geographicRegion": "TURKEY",
        "patentStatus": "active",
        "latitude": 39.8900,
        "longitude": 32.7800
    },
    {
        "patentNo": "US2024/334455",
        "keywords": "artificial intelligence, machine learning, optimization",
        "abstract": "An AI system for optimizing industrial processes.",
        "applicationDate": "15.06.2024",
        "publicationDate": "22.12.2024",
        "applicant": "General Electric",
        "ipc": "G06N 20/00",
        "cpc": "G06N 20/00",
        "claims": "1. An AI optimization system...\n2. The process optimization method of claim 1...",
        "geographicRegion": "USA",
        "patentStatus": "active",
        "latitude": 42.3601,
        "longitude": -71.0589
    },
    {
        "patentNo": "EP2024/445566",
        "keywords": "biotechnology, gene therapy, CRISPR",
        "abstract": "An improved CRISPR-based gene editing system.",
        "applicationDate": "20.07.2024",
        "publicationDate": "27.01.2025",
        "applicant": "Bayer",
        "ipc": "C12N 15/10",
        "cpc": "C12N 15/113",
        "claims": "1. A gene editing system...\n2. The therapeutic method of claim 1...",
        "geographicRegion": "EU",
        "patentStatus": "active",
        "latitude": 51.2277,
        "longitude": 6.7735
    },
    {
        "patentNo": "CN2024/778899",
        "keywords": "electric vehicle, battery, charging",
        "abstract": "A fast-charging system for electric vehicles.",
        "applicationDate": "03.08.2024",
        "publicationDate": "10.02.2025",
        "applicant": "BYD Company Limited",
        "ipc": "B60L 53/00",
        "cpc": "B60L 53/00",
        "claims": "1. An EV charging system...\n2. The charging method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 22.5431,
        "longitude": 114.0579
    },
    {
        "patentNo": "JP2024/990011",
        "keywords": "nanotechnology, materials science, coating",
        "abstract": "A nanotech-based protective coating system.",
        "applicationDate": "15.09.2024",
        "publicationDate": "22.03.2025",
        "applicant": "Mitsubishi Chemical",
        "ipc": "C09D 5/00",
        "cpc": "C09D 5/00",
        "claims": "1. A nanotech coating system...\n2. The application method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 35.6762,
        "longitude": 139.6503
    },
    {
        "patentNo": "KR2024/112233",
        "keywords": "virtual reality, gaming, entertainment",
        "abstract": "An immersive VR gaming system with advanced haptics.",
        "applicationDate": "20.10.2024",
        "publicationDate": "27.04.2025",
        "applicant": "LG Electronics",
        "ipc": "A63F 13/00",
        "cpc": "A63F 13/00",
        "claims": "1. A VR gaming system...\n2. The haptic feedback method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 37.5665,
        "longitude": 126.9780
    },
    {
        "patentNo": "TR2024/334455",
        "keywords": "agriculture, IoT, smart farming",
        "abstract": "An IoT-based precision agriculture system.",
        "applicationDate": "10.11.2024",
        "publicationDate": "17.05.2025",
        "applicant": "TARIM A.Ş.",
        "ipc": "A01G 25/16",
        "cpc": "A01G 25/16",
        "claims": "1. A smart farming system...\n2. The precision agriculture method of claim 1...",
        "geographicRegion": "TURKEY",
        "patentStatus": "active",
        "latitude": 39.9334,
        "longitude": 32.8597
    },
    {
        "patentNo": "US2024/445566",
        "keywords": "space technology, satellite, communication",
        "abstract": "A next-generation satellite communication system.",
        "applicationDate": "15.12.2024",
        "publicationDate": "22.06.2025",
        "applicant": "SpaceX",
        "ipc": "H04B 7/185",
        "cpc": "H04B 7/185",
        "claims": "1. A satellite communication system...\n2. The global coverage method of claim 1...",
        "geographicRegion": "USA",
        "patentStatus": "active",
        "latitude": 34.0522,
        "longitude": -118.2437
    },
    {
        "patentNo": "EP2024/778899",
        "keywords": "renewable energy, wind power, turbine",
        "abstract": "An innovative wind turbine design for offshore applications.",
        "applicationDate": "20.01.2025",
        "publicationDate": "27.07.2025",
        "applicant": "Siemens Gamesa",
        "ipc": "F03D 1/00",
        "cpc": "F03D 1/00",
        "claims": "1. An offshore wind turbine system...\n2. The energy generation method of claim 1...",
        "geographicRegion": "EU",
        "patentStatus": "active",
        "latitude": 55.6761,
        "longitude": 12.5683
    },
    {
        "patentNo": "CN2024/990011",
        "keywords": "artificial intelligence, robotics, automation",
        "abstract": "An AI-powered robotic system for industrial applications.",
        "applicationDate": "03.02.2025",
        "publicationDate": "10.08.2025",
        "applicant": "Huawei Technologies",
        "ipc": "B25J 9/16",
        "cpc": "B25J 9/163",
        "claims": "1. An AI robotic system...\n2. The automation method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 22.5431,
        "longitude": 114.0579
    },
    {
        "patentNo": "JP2024/112233",
        "keywords": "medical device, imaging, diagnostic",
        "abstract": "A portable medical imaging device for clinical use.",
        "applicationDate": "15.03.2025",
        "publicationDate": "22.09.2025",
        "applicant": "Sony Corporation",
        "ipc": "A61B 5/00",
        "cpc": "A61B 5/0059",
        "claims": "1. A medical imaging device...\n2. The diagnostic method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 35.6762,
        "longitude": 139.6503
    },
    {
        "patentNo": "KR2024/334455",
        "keywords": "electric vehicle, battery, charging",
        "abstract": "A fast-charging system for electric vehicles.",
        "applicationDate": "20.04.2025",
        "publicationDate": "27.10.2025",
        "applicant": "Hyundai Motor Company",
        "ipc": "B60L 53/00",
        "cpc": "B60L 53/00",
        "claims": "1. An EV charging system...\n2. The charging method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 37.5665,
        "longitude": 126.9780
    },
    {
        "patentNo": "TR2024/445566",
        "keywords": "defense, radar, detection",
        "abstract": "An advanced radar system for military applications.",
        "applicationDate": "10.05.2025",
        "publicationDate": "17.11.2025",
        "applicant": "ROKETSAN A.Ş.",
        "ipc": "G01S 13/00",
        "cpc": "G01S 13/00",
        "claims": "1. A radar detection system...\n2. The detection method of claim 1...",
        "geographicRegion": "TURKEY",
        "patentStatus": "active",
        "latitude": 39.9334,
        "longitude": 32.8597
    },
    {
        "patentNo": "US2024/778899",
        "keywords": "quantum computing, encryption, security",
        "abstract": "A quantum-resistant encryption system.",
        "applicationDate": "15.06.2025",
        "publicationDate": "22.12.2025",
        "applicant": "Google LLC",
        "ipc": "H04L 9/08",
        "cpc": "H04L 9/0852",
        "claims": "1. A quantum encryption system...\n2. The security method of claim 1...",
        "geographicRegion": "USA",
        "patentStatus": "active",
        "latitude": 37.7749,
        "longitude": -122.4194
    },
    {
        "patentNo": "EP2024/990011",
        "keywords": "biotechnology, gene therapy, CRISPR",
        "abstract": "An improved CRISPR-based gene editing system.",
        "applicationDate": "20.07.2025",
        "publicationDate": "27.01.2026",
        "applicant": "Roche",
        "ipc": "C12N 15/10",
        "cpc": "C12N 15/113",
        "claims": "1. A gene editing system...\n2. The therapeutic method of claim 1...",
        "geographicRegion": "EU",
        "patentStatus": "active",
        "latitude": 47.3769,
        "longitude": 8.5417
    },
    {
        "patentNo": "CN2024/112233",
        "keywords": "robotics, automation, manufacturing",
        "abstract": "An advanced robotic system for manufacturing.",
        "applicationDate": "03.08.2025",
        "publicationDate": "10.02.2026",
        "applicant": "Huawei Technologies",
        "ipc": "B25J 9/16",
        "cpc": "B25J 9/163",
        "claims": "1. A robotic manufacturing system...\n2. The automation method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 22.5431,
        "longitude": 114.0579
    },
    {
        "patentNo": "JP2024/334455",
        "keywords": "5G, communication, network",
        "abstract": "A novel 5G network optimization system.",
        "applicationDate": "15.09.2025",
        "publicationDate": "22.03.2026",
        "applicant": "NTT Docomo",
        "ipc": "H04W 24/02",
        "cpc": "H04W 24/02",
        "claims": "1. A 5G network system...\n2. The optimization method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 35.6762,
        "longitude": 139.6503
    },
    {
        "patentNo": "KR2024/445566",
        "keywords": "artificial intelligence, machine learning, optimization",
        "abstract": "An AI system for process optimization.",
        "applicationDate": "20.10.2025",
        "publicationDate": "27.04.2026",
        "applicant": "Samsung Electronics",
        "ipc": "G06N 20/00",
        "cpc": "G06N 20/00",
        "claims": "1. An AI optimization system...\n2. The machine learning method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 37.5665,
        "longitude": 126.9780
    },
    {
        "patentNo": "TR2024/778899",
        "keywords": "defense, aerospace, propulsion",
        "abstract": "An advanced aerospace propulsion system.",
        "applicationDate": "10.11.2025",
        "publicationDate": "17.05.2026",
        "applicant": "TUSAŞ",
        "ipc": "F02K 9/00",
        "cpc": "F02K 9/00",
        "claims": "1. An aerospace propulsion system...\n2. The propulsion method of claim 1...",
        "geographicRegion": "TURKEY",
        "patentStatus": "active",
        "latitude": 39.9334,
        "longitude": 32.8597
    },
    {
        "patentNo": "US2024/990011",
        "keywords": "medical device, imaging, diagnostic",
        "abstract": "An advanced medical imaging system.",
        "applicationDate": "15.12.2025",
        "publicationDate": "22.06.2026",
        "applicant": "GE Healthcare",
        "ipc": "A61B 5/00",
        "cpc": "A61B 5/0059",
        "claims": "1. A medical imaging system...\n2. The diagnostic method of claim 1...",
        "geographicRegion": "USA",
        "patentStatus": "active",
        "latitude": 41.8781,
        "longitude": -87.6298
    },
    {
        "patentNo": "EP2025/112233",
        "keywords": "renewable energy, solar power, efficiency",
        "abstract": "A high-efficiency solar power system.",
        "applicationDate": "20.01.2026",
        "publicationDate": "27.07.2026",
        "applicant": "SMA Solar Technology",
        "ipc": "H02S 20/32",
        "cpc": "H02S 20/32",
        "claims": "1. A solar power system...\n2. The efficiency optimization method of claim 1...",
        "geographicRegion": "EU",
        "patentStatus": "active",
        "latitude": 50.1109,
        "longitude": 8.6821
    },
    {
        "patentNo": "CN2025/334455",
        "keywords": "quantum computing, encryption, security",
        "abstract": "A quantum-resistant security system.",
        "applicationDate": "03.02.2026",
        "publicationDate": "10.08.2026",
        "applicant": "Huawei Technologies",
        "ipc": "H04L 9/08",
        "cpc": "H04L 9/0852",
        "claims": "1. A quantum security system...\n2. The encryption method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 22.5431,
        "longitude": 114.0579
    },
    {
        "patentNo": "JP2025/445566",
        "keywords": "robotics, automation, manufacturing",
        "abstract": "An advanced manufacturing robot system.",
        "applicationDate": "15.03.2026",
        "publicationDate": "22.09.2026",
        "applicant": "Fanuc Corporation",
        "ipc": "B25J 9/16",
        "cpc": "B25J 9/163",
        "claims": "1. A manufacturing robot system...\n2. The automation method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 35.6762,
        "longitude": 139.6503
    },
    {
        "patentNo": "KR2025/778899",
        "keywords": "5G, communication, network",
        "abstract": "A next-generation communication system.",
        "applicationDate": "20.04.2026",
        "publicationDate": "27.10.2026",
        "applicant": "Samsung Electronics",
        "ipc": "H04W 24/02",
        "cpc": "H04W 24/02",
        "claims": "1. A communication system...\n2. The network optimization method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 37.5665,
        "longitude": 126.9780
    },
    {
        "patentNo": "TR2025/990011",
        "keywords": "medical device, imaging, diagnostic",
        "abstract": "A portable medical diagnostic system.",
        "applicationDate": "10.05.2026",
        "publicationDate": "17.11.2026",
        "applicant": "TÜBİTAK",
        "ipc": "A61B 5/00",
        "cpc": "A61B 5/0059",
        "claims": "1. A medical diagnostic system...\n2. The diagnostic method of claim 1...",
        "geographicRegion": "TURKEY",
        "patentStatus": "active",
        "latitude": 39.8900,
        "longitude": 32.7800
    },
    {
        "patentNo": "US2025/112233",
        "keywords": "artificial intelligence, machine learning, optimization",
        "abstract": "An AI-based optimization system.",
        "applicationDate": "15.06.2026",
        "publicationDate": "22.12.2026",
        "applicant": "General Electric",
        "ipc": "G06N 20/00",
        "cpc": "G06N 20/00",
        "claims": "1. An AI optimization system...\n2. The machine learning method of claim 1...",
        "geographicRegion": "USA",
        "patentStatus": "active",
        "latitude": 42.3601,
        "longitude": -71.0589
    },
    {
        "patentNo": "EP2025/334455",
        "keywords": "biotechnology, gene therapy, CRISPR",
        "abstract": "An advanced gene therapy system.",
        "applicationDate": "20.07.2026",
        "publicationDate": "27.01.2027",
        "applicant": "Bayer",
        "ipc": "C12N 15/10",
        "cpc": "C12N 15/113",
        "claims": "1. A gene therapy system...\n2. The therapeutic method of claim 1...",
        "geographicRegion": "EU",
        "patentStatus": "active",
        "latitude": 51.2277,
        "longitude": 6.7735
    },
    {
        "patentNo": "CN2025/445566",
        "keywords": "electric vehicle, battery, charging",
        "abstract": "An advanced EV charging system.",
        "applicationDate": "03.08.2026",
        "publicationDate": "10.02.2027",
        "applicant": "BYD Company Limited",
        "ipc": "B60L 53/00",
        "cpc": "B60L 53/00",
        "claims": "1. An EV charging system...\n2. The charging method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 22.5431,
        "longitude": 114.0579
    },
    {
        "patentNo": "JP2025/778899",
        "keywords": "nanotechnology, materials science, coating",
        "abstract": "An advanced nanotech coating system.",
        "applicationDate": "15.09.2026",
        "publicationDate": "22.03.2027",
        "applicant": "Mitsubishi Chemical",
        "ipc": "C09D 5/00",
        "cpc": "C09D 5/00",
        "claims": "1. A nanotech coating system...\n2. The application method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 35.6762,
        "longitude": 139.6503
    },
    {
        "patentNo": "KR2025/990011",
        "keywords": "virtual reality, gaming, entertainment",
        "abstract": "An advanced VR gaming system.",
        "applicationDate": "20.10.2026",
        "publicationDate": "27.04.2027",
        "applicant": "LG Electronics",
        "ipc": "A63F 13/00",
        "cpc": "A63F 13/00",
        "claims": "1. A VR gaming system...\n2. The entertainment method of claim 1...",
        "geographicRegion": "ASIA",
        "patentStatus": "active",
        "latitude": 37.5665,
        "longitude": 126.9780
    }
]

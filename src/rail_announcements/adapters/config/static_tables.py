"""Built-in static tables used when the configuration file does not override them."""

# Operators with a combined "<operator> service to" recording
WITH_SERVICE_TO_FROM_OPERATORS: tuple[str, ...] = (
    "a replacement bus",
    "additional",
    "additional Chiltern Railways",
    "additional football special",
    "Alphaline",
    "Anglia Railways",
    "Anglia Railways Train",
    "Arriva CrossCountry",
    "Arriva Trains Merseyside",
    "Arriva Trains Northern",
    "Arriva Trains Wales",
    "Blackheath and Woolwich",
    "Blackheath and Woolwich Arsenal",
    "Blackheath and Woolwich Arsenal Line",
    "c2c",
    "c2c Rail",
    "Cardiff Railways",
    "Central Trains",
    "Charter",
    "Chiltern Line",
    "Chiltern Railway Company",
    "Chiltern Railways",
    "Chiselhurst and Maidstone East",
    "Chiselhurst and Maidstone East Line",
    "Chiselhurst Sevenoaks and Canterbury West",
    "Chiselhurst Sevenoaks and Canterbury West Line",
    "Connex",
    "Connex Express",
    "Connex Metro",
    "Connex Racecourse Special",
    "Connex Rail",
    "Connex South Central",
    "Connex South Eastern",
    "Country",
    "CrossCountry",
    "diverted",
    "East Midlands",
    "East Midlands Trains",
    "Eurostar",
    "express",
    "First Capital Connect",
    "First Great Western",
    "First Great Western Adelante",
    "First Great Western Atlantic Coast Express",
    "First Great Western Bristolian",
    "First Great Western Cathedrals Express",
    "First Great Western Cheltenham Flier",
    "First Great Western Cheltenham Spa Express",
    "First Great Western Cornish Riviera",
    "First Great Western Devon Belle",
    "First Great Western Golden Hind",
    "First Great Western Hibernian",
    "First Great Western High Speed",
    "First Great Western Intercity",
    "First Great Western Link",
    "First Great Western Mayflower",
    "First Great Western Merchant Venturer",
    "First Great Western Motorail",
    "First Great Western Night Riviera",
    "First Great Western Pembroke Coast Express",
    "First Great Western Red Dragon",
    "First Great Western Royal Duchy",
    "First Great Western Royal Wessex",
    "First Great Western St David",
    "First Great Western Torbay Express",
    "First Transpennine Express",
    "First Transpennine Service",
    "football special",
    "for seat reservations holders only",
    "Gatwick Express",
    "GNER",
    "Grand Central",
    "Great Eastern",
    "Great Eastern Railway",
    "Great North Eastern Railway",
    "Great North Eastern Railways",
    "Great North Eastern Railways White Rose",
    "Great North Eastern Railways Yorkshire Pullman",
    "Great Northern",
    "Great Western",
    "Heathrow Express",
    "Holidaymaker",
    "Holidaymaker Express",
    "Hull Trains",
    "Island Line",
    "London Midland",
    "London Midland City",
    "London Midland Express",
    "London Overground",
    "London Transport Buses",
    "London Underground",
    "LTS Rail",
    "Maidstone East and Ashford International Line",
    "Maidstone East and Ashford Line",
    "Maidstone East and Canterbury West Line",
    "Maidstone East and Dover Priory Line",
    "Merseyside Electrics",
    "Midland Mainline",
    "Midland Mainline High Speed Train",
    "Midland Mainline Turbostar",
    "National Express",
    "National Express East Coast",
    "New Southern Railway",
    "New Southern Railway Brighton Express",
    "North London Railway",
    "Northern",
    "Northern Rail",
    "Northern Spirit",
    "One",
    "One Anglia",
    "Orient Express",
    "private charter train",
    "Racecourse Special",
    "replacement bus",
    "return charter train",
    "rugby special",
    "ScotRail",
    "ScotRail Railways",
    "Silverlink County",
    "Silverlink Metro",
    "South Central",
    "South Central Trains",
    "South West Trains",
    "Southeastern",
    "Southeastern Trains",
    "Southern",
    "Southern Railway",
    "Southern Railway Brighton Express",
    "special charter",
    "Stansted Express",
    "steam charter train",
    "stopping",
    "Tarka Line",
    "Thames Trains",
    "Thameslink",
    "Thameslink City Flier",
    "Thameslink City Metro",
    "The Mid Hants Steam Railway",
    "The National Express East Coast",
    "The Watercress Line",
    "The Yorkshire Pullman",
    "Tramlink",
    "Tyne and Wear Metro",
    "Valley Lines",
    "Virgin Pendolino",
    "Virgin Trains",
    "Virgin Trains Armada",
    "Virgin Trains Cornish Scot",
    "Virgin Trains Cornishman",
    "Virgin Trains Cross Country",
    "Virgin Trains Devon Scot",
    "Virgin Trains Devonian",
    "Virgin Trains Dorset Scot",
    "Virgin Trains Midland Scot",
    "Virgin Trains Pines Express",
    "Virgin Trains Sussex Scot",
    "Virgin Trains Wessex Scot",
    "Virgin Voyager",
    "WAGN",
    "Wales and Borders",
    "Wales and West",
    "Wales and West Alphaline",
    "Wales and West Weymouth Sand and Cycle Explorer",
    "Wessex",
    "West Anglia",
    "West Anglia Great Northern Railway",
    "West Anglia Great Northern Railways",
    "West Coast Railway Company",
    "White Rose",
    "Yorkshire Pullman",
)

# Operators only recorded as a bare name
STANDALONE_ONLY_OPERATORS: tuple[str, ...] = (
    "Channel Tunnel Rail Link",
    "Chiltern Railway company",
    "Croydon Tramlink",
    "First Transpennine",
    "intercity charter train",
    "international",
    "London North Western Railway",
    "mainline",
    "North London Railways",
    "North Western Trains",
    "Regional Railways charter train",
    "ScotRail Express",
    "South London Metro",
    "South Western Railway",
    "Sussex Scot",
    "Transpennine",
    "Transpennine Express",
    "Virgin Trains the Sussex Scot",
    "West Midlands Railway",
    "West Yorkshire metro train",
)

DISRUPTION_REASONS: tuple[str, ...] = (
    "a broken down freight train",
    "a broken down preceding train",
    "a broken down train",
    "a broken rail",
    "a cable fire",
    "a chemical spillage",
    "a currently unidentified reason which is under investigation",
    "a customer having been taken ill on a preceding train",
    "a customer having been taken ill on this train",
    "a dangerous gas leak",
    "a derailment",
    "a driver shortage",
    "a failed train",
    "a failure of level crossing apparatus",
    "a failure of signalling equipment",
    "a fallen tree on the line",
    "a fatality",
    "a fault on a level crossing",
    "a fault on a preceding that has now been rectified",
    "a fault on a preceding train",
    "a fault on the train that has now been rectified",
    "a fault on the train",
    "a fault on this train which cannot be rectified",
    "a fault on this train which is being attended to",
    "a fault on trackside equipment",
    "a fault that has occurred whilst attaching coaches to this train",
    "a fault that has occurred whilst detaching coaches from this train",
    "a fault with the door mechanism on board a preceding train",
    "a fault with the door mechanism on board this train",
    "a fire",
    "a gas leak in the area",
    "a lack of suitable carriages",
    "a landslide",
    "a landslip",
    "a late-running preceding service",
    "a lightning strike affecting the signalling equipment",
    "a lightning strike",
    "a line blockage",
    "a lineside fire",
    "a major electrical power fault",
    "a mechanical fault on a level crossing",
    "a member of staff providing assistance to a passenger",
    "a passenger incident",
    "a passenger requiring urgent attention",
    "a points failure",
    "a power failure",
    "a problem on property adjacent to the railway",
    "a report of an injury to a person on the track",
    "a road vehicle damaging a level crossing",
    "a road vehicle on the line",
    "a road vehicle striking a railway bridge",
    "a security alert",
    "a shortage of available coaches",
    "a shortage of serviceable trains",
    "a shortage of train dispatch staff",
    "a signal failure",
    "a signalling apparatus failure",
    "a slow-running preceding freight train running behind schedule",
    "a slow-running preceding train with a technical fault",
    "a staff shortage",
    "a suspected fatality",
    "a technical fault on the service",
    "a technical fault to lineside equipment",
    "a technical problem",
    "a temporary fault with the signalling equipment",
    "a temporary shortage of drivers",
    "a temporary shortage of train crews",
    "a temporary speed restriction because of signalling equipment repairs",
    "a temporary speed restriction because of track repairs",
    "a ticket irregularity on board a preceding train",
    "a ticket irregularity on board this train",
    "a track circuit failure",
    "a train failure",
    "a train speed restriction caused by a technical fault on this train",
    "additional cleaning duties",
    "additional coaches being attached to the train",
    "additional maintenance requirements at the depot",
    "additional safety duties being carried out on board this train",
    "additional train movements to remove a broken down train",
    "adverse weather conditions",
    "ambulance attending an incident on the train",
    "ambulance attending an incident on this train",
    "an accident on a level crossing",
    "an accident to a member of the public",
    "an act of vandalism on this train",
    "an earlier act of vandalism on this train",
    "an earlier blockage of the line",
    "an earlier broken down train causing congestion",
    "an earlier broken down train",
    "an earlier electrical power supply problem",
    "an earlier fallen tree on the line",
    "an earlier fallen tree",
    "an earlier fatality",
    "an earlier fault on a level crossing",
    "an earlier fault that occurred whilst attaching coaches to this train",
    "an earlier fault that occurred whilst detaching coaches from this train",
    "an earlier fault with the door mechanism on board a preceding train",
    "an earlier fault with the door mechanism on board this train",
    "an earlier fault with the signalling equipment",
    "an earlier landslide",
    "an earlier lineside fire",
    "an earlier road vehicle striking a railway bridge",
    "an earlier security alert",
    "an earlier trespassing incident causing congestion",
    "an earlier trespassing incident",
    "an electrical power supply problem",
    "an external cause beyond our control",
    "an incident on the line",
    "an injury to a person on the track",
    "an obstruction on the line",
    "animals on the railway line",
    "animals on the track",
    "awaiting a connecting service",
    "awaiting a member of the train crew",
    "awaiting a portion of the train",
    "awaiting a replacement driver",
    "awaiting an available platform because of service congestion",
    "awaiting replacement coaches",
    "awaiting signal clearance",
    "bad weather conditions",
    "being held awaiting a late running connection",
    "being held awaiting a replacement bus connection",
    "cancellation of the incoming service",
    "caused by servicing problems in the depot",
    "children playing near the line",
    "christmas holidays",
    "coaches being detached from this train",
    "conductor rail problems",
    "confusion caused by a fault with the station information board",
    "congestion caused by a failed train",
    "congestion",
    "crewing difficulties",
    "damaged track",
    "debris blown on the line",
    "debris on the line",
    "delay to a preceding train",
    "earlier emergency track repairs",
    "earlier engineering works",
    "earlier overrunning engineering work",
    "earlier reports of a disturbance on board this train",
    "earlier reports of animals on the line",
    "earlier reports of debris on the line",
    "earlier reports of trespassers on the line",
    "earlier vandalism",
    "electric conductor rail problems",
    "electrical problems with the train",
    "emergency engineering work",
    "emergency track repairs",
    "engineering works",
    "engineering work",
    "extreme weather conditions",
    "failure of a preceding train",
    "flooding on the line",
    "flooding",
    "fog",
    "following signal staff instructions",
    "heavy rain",
    "high winds",
    "industrial action",
    "late running of a previous train",
    "mechanical problems with the train",
    "mechanical problems",
    "no driver available",
    "objects being thrown onto the line",
    "objects on the line",
    "on a preceding train",
    "overcrowding caused by the short formation of this service today",
    "overcrowding caused by the",
    "overcrowding on the train",
    "overcrowding",
    "overhead electric line problems",
    "overhead line damage",
    "overhead line problems",
    "overrunning engineering work",
    "passenger illness",
    "police activity on the line",
    "police attending a disturbance on a preceding train",
    "police attending a disturbance on this train",
    "police attending an incident on the train",
    "police attending an incident on this train",
    "police persuing suspects on the line",
    "poor rail conditions caused by frost",
    "poor rail conditions caused by leaf fall",
    "poor rail conditions",
    "power car problems",
    "refueling",
    "replacing emergency equipment on this train",
    "reports of a blockage on the line",
    "reports of a disturbance on board this train",
    "reports of animals on the line",
    "reports of debris on the line",
    "reports of trespass on the line",
    "revenue protection officers attending this train",
    "severe weather conditions",
    "short formation of this train",
    "signal testing",
    "signalling difficulties",
    "signalling equipment repairs",
    "sliding train door problems",
    "slippery rail conditions",
    "snow",
    "staff shortages",
    "staff sickness",
    "suspected damage to a railway bridge by a road vehicle",
    "suspected damage to a railway bridge",
    "suspected terrorist threat",
    "the advice of the emergency services",
    "the emergency communication cord being activated on this train",
    "the emergency communication cord being activated",
    "the emergency communication cord being pulled on the service",
    "the emergency communication cord being pulled on the train",
    "the emergency cord being pulled on the service",
    "the emergency cord being pulled on the train",
    "the extreme heat",
    "the fire brigade attending an incident on the train",
    "the fire brigade attending an incident on this train",
    "the late arrival of an incoming train",
    "the late running of a preceding train",
    "the london fire brigade attending an incident on the train",
    "the london fire brigade attending an incident on this train",
    "the previous service being delayed",
    "the short formation of this train",
    "the train being diverted from its scheduled route",
    "the train running on reduced engine power",
    "the unfortunate action of vandals",
    "third rail problems",
    "this train making additional stops on its journey",
    "track repairs",
    "train being held awaiting an available platform",
    "train door problems",
    "trespass on the line",
    "vandalism on a preceding train",
    "vandalism on the service",
    "vandalism",
)
